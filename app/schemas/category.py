from dataclasses import dataclass
from enum import Enum


class ItemCategory(str, Enum):
    REFRIGERATOR = "refrigerator"
    WASHER = "washer"
    DRYER = "dryer"
    DISHWASHER = "dishwasher"
    OVEN_RANGE = "oven-range"
    MICROWAVE = "microwave"
    HVAC = "hvac"
    WATER_HEATER = "water-heater"
    TV = "tv"
    LAPTOP = "laptop"
    DESKTOP = "desktop"
    TABLET = "tablet"
    SMARTPHONE = "smartphone"
    AUDIO = "audio"
    CAMERA = "camera"
    OTHER = "other"


@dataclass(frozen=True)
class CategoryOption:
    value: ItemCategory
    label: str  # shown in the form
    group: str
    short_label: str = ""  # used when naming an item, e.g. "Samsung Washing Machine"


CATEGORY_OPTIONS: tuple[CategoryOption, ...] = (
    CategoryOption(ItemCategory.REFRIGERATOR, "Refrigerator / Freezer", "Appliances", "Refrigerator"),
    CategoryOption(ItemCategory.WASHER, "Washing Machine", "Appliances", "Washing Machine"),
    CategoryOption(ItemCategory.DRYER, "Dryer", "Appliances", "Dryer"),
    CategoryOption(ItemCategory.DISHWASHER, "Dishwasher", "Appliances", "Dishwasher"),
    CategoryOption(ItemCategory.OVEN_RANGE, "Oven / Range / Stove", "Appliances", "Oven/Range"),
    CategoryOption(ItemCategory.MICROWAVE, "Microwave", "Appliances", "Microwave"),
    CategoryOption(ItemCategory.HVAC, "HVAC / Air Conditioner", "Appliances", "HVAC System"),
    CategoryOption(ItemCategory.WATER_HEATER, "Water Heater", "Appliances", "Water Heater"),
    CategoryOption(ItemCategory.TV, "Television", "Electronics", "Television"),
    CategoryOption(ItemCategory.LAPTOP, "Laptop", "Electronics", "Laptop"),
    CategoryOption(ItemCategory.DESKTOP, "Desktop Computer", "Electronics", "Desktop Computer"),
    CategoryOption(ItemCategory.TABLET, "Tablet", "Electronics", "Tablet"),
    CategoryOption(ItemCategory.SMARTPHONE, "Smartphone", "Electronics", "Smartphone"),
    CategoryOption(ItemCategory.AUDIO, "Audio / Speakers", "Electronics", "Audio System"),
    CategoryOption(ItemCategory.CAMERA, "Camera", "Electronics", "Camera"),
    CategoryOption(ItemCategory.OTHER, "Other", "Other"),
)

_OPTIONS_BY_VALUE = {opt.value.value: opt for opt in CATEGORY_OPTIONS}


def category_label(category: ItemCategory | str | None) -> str:
    """Short naming label for a category, or "" for other/empty/unknown values."""
    if isinstance(category, ItemCategory):
        category = category.value
    opt = _OPTIONS_BY_VALUE.get(category or "")
    return opt.short_label if opt else ""


def grouped_category_options() -> list[tuple[str, list[CategoryOption]]]:
    groups: dict[str, list[CategoryOption]] = {}
    for opt in CATEGORY_OPTIONS:
        groups.setdefault(opt.group, []).append(opt)
    return list(groups.items())
