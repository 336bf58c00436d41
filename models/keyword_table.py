"""
Keyword table for automatic item images.

Order matters: the resolver returns the image of the first entry with a
matching keyword. Keywords are bilingual (English / Arabic).
"""

from models.entities import ImageRef


PERFUME = ImageRef(key="perfume", filename="perfume.png", emoji="🧴")
SHOES = ImageRef(key="shoes", filename="shoes.png", emoji="👟")
BAG = ImageRef(key="bag", filename="bag.png", emoji="👜")
DRESS = ImageRef(key="dress", filename="dress.png", emoji="👗")
LIPSTICK = ImageRef(key="lipstick", filename="lipstick.png", emoji="💄")

KEYWORD_TABLE: tuple[tuple[tuple[str, ...], ImageRef], ...] = (
    (("perfume", "عطر", "طيب", "عطور", "fragrance", "spray"), PERFUME),
    (("shoe", "shoes", "حذاء", "جزمة", "sneaker", "boot"), SHOES),
    (("bag", "شنطة", "حقيبة"), BAG),
    (("dress", "فستان", "ملابس"), DRESS),
    (("lipstick", "مسكرة", "mascara"), LIPSTICK),
)

# First entry's image doubles as the fallback
DEFAULT_IMAGE = KEYWORD_TABLE[0][1]

# Items present when a session starts (name, price)
DEFAULT_ITEMS: tuple[tuple[str, float], ...] = (
    ("perfume", 35),
    ("shoes", 60),
    ("bag", 25),
    ("dress", 120),
    ("lipstick", 15),
)
