# ===============================================
# MAP.PY - Defines the travel route through Batangas
# Ordered by unlock cost: Taal (Start) → Lemery → Mabini
# → Laurel → Batangas → Cuenca
# ===============================================

from models import Category, Municipality, Question, Spot
from spots import (
    taal_spots,
    lemery_spots,
    mabini_spots,
    laurel_spots,
    batangas_spots,
    cuenca_spots,
)

municipalities = [
    {"name": "Taal",     "threshold": 0,  "spots": taal_spots},
    {"name": "Lemery",   "threshold": 10, "spots": lemery_spots},
    {"name": "Mabini",   "threshold": 20, "spots": mabini_spots},
    {"name": "Laurel",   "threshold": 30, "spots": laurel_spots},
    {"name": "Batangas", "threshold": 40, "spots": batangas_spots},
    {"name": "Cuenca",   "threshold": 50, "spots": cuenca_spots},
]


def build_spot(data):
    questions = [Question(q["prompt"], q["options"], q["answer"]) for q in data["questions"]]
    return Spot(data["name"], data["description"], Category(data["category"]), questions)


def build_municipalities(table=None):
    """Fresh Municipality objects (all but the free ones locked) for a new session."""
    table = municipalities if table is None else table
    return [
        Municipality(m["name"], index, m["threshold"], [build_spot(s) for s in m["spots"]])
        for index, m in enumerate(table)
    ]
