"""
Small book catalog used by the demo page and the smoke script.
"""

from trendrank.schemas import CatalogItem

_RAW = [
    {"id": "b001", "title": "Dune", "author": "Frank Herbert", "category": "Science Fiction", "description": "A desert planet, a noble house and the spice that controls the universe.", "rating": 4.6, "price": 12.99, "published_year": 1965, "likes": 842, "purchases": 1210, "age_rating": "Young Adult"},
    {"id": "b002", "title": "The Hobbit", "author": "J.R.R. Tolkien", "category": "Fantasy", "description": "Bilbo Baggins is swept into a quest for dragon-guarded treasure.", "rating": 4.8, "price": 10.5, "published_year": 1937, "likes": 1290, "purchases": 1875, "age_rating": "All Ages"},
    {"id": "b003", "title": "Neuromancer", "author": "William Gibson", "category": "Science Fiction", "description": "A washed-up hacker is hired for one last job in cyberspace.", "rating": 4.1, "price": 9.99, "published_year": 1984, "likes": 410, "purchases": 530, "age_rating": "Adult"},
    {"id": "b004", "title": "Pride and Prejudice", "author": "Jane Austen", "category": "Classics", "description": "Elizabeth Bennet and Mr. Darcy misjudge each other in Regency England.", "rating": 4.7, "price": 7.25, "published_year": 1813, "likes": 990, "purchases": 1402, "age_rating": "All Ages"},
    {"id": "b005", "title": "Gone Girl", "author": "Gillian Flynn", "category": "Thriller", "description": "A wife disappears and her husband becomes the prime suspect.", "rating": 4.2, "price": 11.0, "published_year": 2012, "likes": 655, "purchases": 780, "age_rating": "Adult"},
    {"id": "b006", "title": "The Name of the Wind", "author": "Patrick Rothfuss", "category": "Fantasy", "description": "Kvothe recounts his path from traveling performer to legend.", "rating": 4.5, "price": 13.5, "published_year": 2007, "likes": 720, "purchases": 640, "age_rating": "Young Adult"},
    {"id": "b007", "title": "Sapiens", "author": "Yuval Noah Harari", "category": "History", "description": "A brief history of humankind from foragers to the present.", "rating": 4.4, "price": 16.0, "published_year": 2011, "likes": 870, "purchases": 1120, "age_rating": "Adult"},
    {"id": "b008", "title": "Charlotte's Web", "author": "E.B. White", "category": "Children", "description": "A pig named Wilbur and the spider who saves him.", "rating": 4.6, "price": 6.99, "published_year": 1952, "likes": 560, "purchases": 910, "age_rating": "Children"},
    {"id": "b009", "title": "The Left Hand of Darkness", "author": "Ursula K. Le Guin", "category": "Science Fiction", "description": "An envoy visits a winter world whose people have no fixed sex.", "rating": 4.3, "price": 10.0, "published_year": 1969, "likes": 380, "purchases": 410, "age_rating": "Adult"},
    {"id": "b010", "title": "The Silent Patient", "author": "Alex Michaelides", "category": "Thriller", "description": "A painter shoots her husband and never speaks again.", "rating": 4.1, "price": 12.0, "published_year": 2019, "likes": 600, "purchases": 690, "age_rating": "Adult"},
    {"id": "b011", "title": "Educated", "author": "Tara Westover", "category": "Memoir", "description": "A woman raised off the grid finds her way to a doctorate.", "rating": 4.5, "price": 14.0, "published_year": 2018, "likes": 710, "purchases": 860, "age_rating": "Adult"},
    {"id": "b012", "title": "Matilda", "author": "Roald Dahl", "category": "Children", "description": "A brilliant girl with telekinetic powers stands up to her headmistress.", "rating": 4.7, "price": 7.5, "published_year": 1988, "likes": 640, "purchases": 980, "age_rating": "Children"},
]

CATALOG: list[CatalogItem] = [CatalogItem.model_validate(row) for row in _RAW]
