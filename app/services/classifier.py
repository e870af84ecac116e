import re

from app.schemas.category import ItemCategory

# Checked in order, first match wins. The patterns overlap in free text,
# so the order is part of the behaviour.
CATEGORY_RULES: tuple[tuple[re.Pattern[str], ItemCategory], ...] = (
    (re.compile(r"fridge|refrigerat|freezer"), ItemCategory.REFRIGERATOR),
    (re.compile(r"wash(?:er|ing)"), ItemCategory.WASHER),
    (re.compile(r"dry(?:er|ing)"), ItemCategory.DRYER),
    (re.compile(r"dishwash"), ItemCategory.DISHWASHER),
    (re.compile(r"oven|range|stove|cooktop"), ItemCategory.OVEN_RANGE),
    (re.compile(r"microwave"), ItemCategory.MICROWAVE),
    (re.compile(r"hvac|air\s*condition|furnace|heat\s*pump"), ItemCategory.HVAC),
    (re.compile(r"water\s*heat"), ItemCategory.WATER_HEATER),
    (re.compile(r"tv|television|oled|qled"), ItemCategory.TV),
    (re.compile(r"laptop|notebook|chromebook"), ItemCategory.LAPTOP),
    (re.compile(r"desktop|pc|tower"), ItemCategory.DESKTOP),
    (re.compile(r"tablet|ipad"), ItemCategory.TABLET),
    (re.compile(r"phone|iphone|galaxy\s*s"), ItemCategory.SMARTPHONE),
    (re.compile(r"speaker|soundbar|audio|headphone"), ItemCategory.AUDIO),
    (re.compile(r"camera|dslr|mirrorless"), ItemCategory.CAMERA),
)


def classify_category(brand: str = "", model: str = "", description: str = "") -> ItemCategory:
    """Guess a category from whatever text the user typed."""
    text = f"{brand} {model} {description or ''}".lower()
    for pattern, category in CATEGORY_RULES:
        if pattern.search(text):
            return category
    return ItemCategory.OTHER
