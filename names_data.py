"""Sample baby-name corpus bundled for suggestions when no candidate list is supplied."""

BOY_NAMES = (
    "Aiden", "Alexander", "Benjamin", "Caleb", "Daniel", "Ethan", "Gabriel", "Henry",
    "Isaac", "James", "Liam", "Mason", "Noah", "Oliver", "Owen", "Samuel",
    "Sebastian", "William", "Zachary", "Aaron", "Adam", "Adrian", "Andrew", "Anthony",
    "Austin", "Blake", "Brandon", "Cameron", "Charles", "Christian", "Christopher", "Colin",
    "Connor", "David", "Dominic", "Dylan", "Elijah", "Evan", "Felix", "Gavin",
    "Ian", "Jack", "Jacob", "Jonathan", "Jordan", "Joshua", "Julian", "Justin",
    "Kevin", "Kyle", "Landon", "Lucas", "Luke", "Marcus", "Matthew", "Max",
    "Michael", "Nathan", "Nicholas", "Parker", "Patrick", "Paul", "Peter", "Ryan",
    "Sean", "Thomas", "Tyler", "Vincent", "Wyatt", "Xavier", "Zane", "Zion",
    "Aarav", "Arjun", "Vivaan", "Ishaan", "Reyansh",
)

GIRL_NAMES = (
    "Abigail", "Amelia", "Aria", "Ava", "Charlotte", "Chloe", "Emma", "Grace",
    "Isabella", "Lily", "Mia", "Olivia", "Sophia", "Zoe", "Addison", "Adeline",
    "Alexis", "Alice", "Allison", "Anna", "Ariana", "Aubrey", "Audrey", "Aurora",
    "Bella", "Brooklyn", "Camila", "Caroline", "Claire", "Eleanor", "Elena", "Elizabeth",
    "Ella", "Ellie", "Emily", "Eva", "Evelyn", "Faith", "Gabriella", "Genesis",
    "Gianna", "Hannah", "Harper", "Hazel", "Isabel", "Jasmine", "Julia", "Katherine",
    "Kennedy", "Layla", "Leah", "Lillian", "Lucy", "Luna", "Madison", "Maya",
    "Natalie", "Nora", "Penelope", "Peyton", "Piper", "Riley", "Ruby", "Samantha",
    "Savannah", "Scarlett", "Serenity", "Skylar", "Stella", "Valentina", "Victoria", "Violet",
    "Vivian", "Willow", "Zara", "Zoey", "Ananya", "Diya", "Saanvi",
)

BABY_NAMES = BOY_NAMES + GIRL_NAMES
