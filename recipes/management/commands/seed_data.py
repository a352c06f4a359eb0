user_fixtures = [
    {"username": "johndoe", "email": "john.doe@example.org", "first_name": "John", "last_name": "Doe"},
    {"username": "janedoe", "email": "jane.doe@example.org", "first_name": "Jane", "last_name": "Doe"},
    {"username": "charlie", "email": "charlie.johnson@example.org", "first_name": "Charlie", "last_name": "Johnson"},
]

BASE_INGREDIENT_POOL = [
    "sel",
    "poivre noir",
    "huile d'olive",
    "gousses d'ail",
    "oignon rouge",
    "tomates cerises",
    "parmesan",
    "basilic frais",
    "blanc de poulet",
    "paprika fumé",
    "cumin",
    "yaourt",
    "pousses d'épinard",
    "champignons",
    "jus de citron",
    "sauce soja",
    "riz blanc",
    "pâtes",
    "beurre",
    "farine",
    "sucre",
    "oeufs",
    "lait",
]

recipe_name_pool = [
    "Soupe de légumes",
    "Gratin dauphinois",
    "Quiche lorraine",
    "Poulet rôti",
    "Risotto aux champignons",
    "Tarte aux pommes",
    "Crêpes",
    "Ratatouille",
    "Boeuf bourguignon",
    "Salade niçoise",
    "Omelette aux herbes",
    "Pâtes au pesto",
]
