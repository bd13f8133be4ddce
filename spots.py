# ===============================================
# SPOTS.PY - Tourist spots & quiz questions by municipality
# Two spots per municipality, listed in travel order:
# Taal → Lemery → Mabini → Laurel → Batangas → Cuenca
# "answer" is the 0-based index of the correct option
# ===============================================

# ==== TAAL (Start) ====
taal_spots = [
    {
        "name": "Taal Volcano",
        "category": "Mountain",
        "description": "One of the popular attractions in this municipality is the Taal Volcano.",
        "questions": [
            {
                "prompt": "It is known for what unique geographical feature?",
                "options": [
                    "Volcano within a lake, and a lake within a volcano",
                    "Volcano between two mountains",
                    "Volcano in the middle of the ocean, and a lake within a volcano",
                ],
                "answer": 0,
            },
        ],
    },
    {
        "name": "Taal Basilica",
        "category": "Heritage Site",
        "description": (
            "Officially the Minor Basilica of Saint Martin of Tours, the architecture blends "
            "Baroque and Neoclassical styles, featuring a grand altar, stained glass windows, "
            "and a dome ceiling. It was built between 1856 and 1878, was designated a national "
            "historical landmark in 1974, and has survived earthquakes in 2017 and the 2020 "
            "Taal Volcano eruption."
        ),
        "questions": [
            {
                "prompt": "It is famous for its title as the?",
                "options": [
                    "The oldest church in the Philippines",
                    "The largest church in the Philippines and Asia",
                    "The most preserved church in the Philippines and Asia",
                ],
                "answer": 1,
            },
        ],
    },
]

# ==== LEMERY (10 pts) ====
lemery_spots = [
    {
        "name": "Fantasy World",
        "category": "Heritage Site",
        "description": (
            "A medieval-themed amusement park. The main attraction is the large, colorful "
            "castle, but it also features other structures like a throne room, fountains, "
            "and a treehouse."
        ),
        "questions": [
            {
                "prompt": "Which fact about this place is true?",
                "options": [
                    "It was never completed due to financial issues",
                    "It is the most visited theme park in the Philippines",
                    "It is closed to the public because it is at risk of collapsing",
                ],
                "answer": 0,
            },
        ],
    },
    {
        "name": "Lakeshore Area",
        "category": "Beach",
        "description": (
            "This quiet lakeshore area offers serene views of Taal Lake and is visited "
            "mostly by locals rather than tourists."
        ),
        "questions": [
            {
                "prompt": "It is known for?",
                "options": [
                    "Having a hidden natural hot spring that feeds into the lake",
                    "Being a peaceful spot ideal for sunrise viewing and lakeside picnics",
                    "Hosting the largest fish market in Batangas",
                ],
                "answer": 1,
            },
        ],
    },
]

# ==== MABINI (20 pts) ====
mabini_spots = [
    {
        "name": "Mount Gulugod Baboy",
        "category": "Mountain",
        "description": (
            "Also known as Mount Gulbab, a popular hiking destination known for its rolling "
            "hills that resemble a pig's spine. The summit has views of the surrounding "
            "mountains, neighboring islands and coastline, and the hike is rated easy to "
            "moderate, appropriate for novices."
        ),
        "questions": [
            {
                "prompt": "The highest peak is called Pinagbanderahan. What does it mean?",
                "options": [
                    "Where the flag was hoisted",
                    "Endless assault",
                    "Pig's spine",
                ],
                "answer": 0,
            },
        ],
    },
    {
        "name": "Camp Netanya Resort and Spa",
        "category": "Beach",
        "description": (
            "A popular resort known for its Greek-style architecture, ocean views and access "
            "to a rich marine sanctuary. Guests can go snorkeling, kayaking, diving and on "
            "boat tours."
        ),
        "questions": [
            {
                "prompt": "Which one is true?",
                "options": [
                    "It is known for being a Santorini-inspired beach resort",
                    "It is known for being an Italy-inspired beach resort",
                    "It is known for being a Rome-inspired beach resort",
                ],
                "answer": 0,
            },
        ],
    },
]

# ==== LAUREL (30 pts) ====
laurel_spots = [
    {
        "name": "Simbahang Bato",
        "category": "Heritage Site",
        "description": (
            "There are many mythical stories about Simbahang Bato, also known as the Kapilya "
            "ni San Gabriel Arkanghel. According to the elders, the place was already sacred "
            "before it became a church, and some say they could hear beautiful music coming "
            "from the cave."
        ),
        "questions": [
            {
                "prompt": "There is also a story that says that this cave...",
                "options": [
                    "Served as a refuge for animals back in the day",
                    "Served as a hiding place for people during the Spanish and American wars",
                    "Was used by ancient people for sacred rituals",
                ],
                "answer": 1,
            },
        ],
    },
    {
        "name": "Ambon-Ambon Falls",
        "category": "Mountain",
        "description": (
            "A tall, multi-tiered waterfall near Taal Lake, estimated to be around 60 meters "
            "high, with a name that means drizzle due to the light spray it creates."
        ),
        "questions": [
            {
                "prompt": "How do visitors reach the falls from the Las Haciendas jump-off point?",
                "options": [
                    "By a paved road that leads directly to the waterfall",
                    "By trekking through a forested trail and river pathways",
                    "It is an artificial waterfall inside a resort",
                ],
                "answer": 1,
            },
        ],
    },
]

# ==== BATANGAS CITY (40 pts) ====
batangas_spots = [
    {
        "name": "Mt. Banoy",
        "category": "Mountain",
        "description": (
            "A beginner-friendly mountain in Batangas City with well-established trails, "
            "scenic views of Batangas Bay and a vantage point overlooking the city."
        ),
        "questions": [
            {
                "prompt": "What is true about Mt. Banoy?",
                "options": [
                    "It is a volcano at the boundary of Batangas and Laguna",
                    "It is a mountain in Batangas City popular for day hikes and views of Batangas Bay",
                    "It is the tallest mountain in Luzon, surpassing Mt. Pulag",
                ],
                "answer": 1,
            },
        ],
    },
    {
        "name": "Nacpan Point",
        "category": "Beach",
        "description": "A quiet viewpoint area with a cliffside overlooking Batangas Bay.",
        "questions": [
            {
                "prompt": "Nacpan Point is visited mainly for:",
                "options": [
                    "Extreme rock climbing",
                    "Sunset viewing and panoramic photos of the coastline",
                    "Its century-old lighthouse",
                ],
                "answer": 1,
            },
        ],
    },
]

# ==== CUENCA (50 pts) ====
cuenca_spots = [
    {
        "name": "Lumampao",
        "category": "Mountain",
        "description": (
            "Known for the Lumampao Viewdeck, which offers views of rolling hills and "
            "valleys and is especially famous for its sunsets."
        ),
        "questions": [
            {
                "prompt": "The view deck is mostly visited for:",
                "options": [
                    "Its strong winds, perfect for paragliding",
                    "Its elevated spot ideal for overlooking Taal Lake",
                    "Its underground tunnels",
                ],
                "answer": 1,
            },
        ],
    },
    {
        "name": "Mt. Maculot",
        "category": "Mountain",
        "description": (
            "A dormant stratovolcano and a favorite day hike for beginners. Its most famous "
            "stop is a cliff edge with a sweeping view of Taal Lake."
        ),
        "questions": [
            {
                "prompt": "What is that famous viewpoint called?",
                "options": [
                    "Grotto Viewpoint",
                    "Summit",
                    "Rockies Viewpoint",
                ],
                "answer": 2,
            },
        ],
    },
]
