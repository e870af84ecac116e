"""Canned per-category profiles used when no model credential is configured.

Everything here is fixed literal data. Specs, year ranges and prices do not
depend on the model number; only the description text and whether an
exact-match price is offered react to the user's input.
"""

from dataclasses import dataclass
from types import MappingProxyType

from app.schemas.category import ItemCategory
from app.schemas.research import PricingSource


@dataclass(frozen=True)
class DemoProfile:
    description_template: str  # formatted with brand= and model=
    specifications: tuple[str, ...]
    year: str
    age: str
    original_msrp: str
    comparable: tuple[tuple[str, str], ...]  # (retailer, price)
    exact_match: tuple[str, str] | None = None
    default_noun: str = "item"

    def describe(self, brand: str, model: str) -> str:
        return self.description_template.format(
            brand=brand or "This",
            model=model or self.default_noun,
        )

    def same_model_pricing(self, model: str) -> list[PricingSource]:
        if not model or self.exact_match is None:
            return []
        retailer, price = self.exact_match
        return [PricingSource(retailer=retailer, price=price, isExactMatch=True)]

    def comparable_pricing(self) -> list[PricingSource]:
        return [
            PricingSource(retailer=retailer, price=price, isExactMatch=False)
            for retailer, price in self.comparable
        ]


class GenericDemoProfile(DemoProfile):
    """Fallback for categories without a dedicated entry."""

    def describe(self, brand: str, model: str) -> str:
        subject = " ".join(p for p in (brand or "This item", f"(model {model})" if model else "") if p)
        return f"{subject} {self.description_template}"


DEMO_PROFILES: MappingProxyType[ItemCategory, DemoProfile] = MappingProxyType({
    ItemCategory.REFRIGERATOR: DemoProfile(
        description_template=(
            "{brand} {model} is a French door refrigerator with an ice maker and water dispenser. "
            "It features a stainless steel exterior, adjustable shelving, and energy-efficient operation. "
            "This model was positioned as a mid-range to premium offering in the manufacturer's lineup."
        ),
        default_noun="refrigerator",
        specifications=(
            "Capacity: 26.5 cu. ft. total (18.6 fridge / 7.9 freezer)",
            'Dimensions: 35.75" W x 70" H x 33.75" D',
            "Energy Star certified — estimated 687 kWh/year",
            "French door configuration with bottom freezer drawer",
            "Built-in ice maker and filtered water dispenser",
        ),
        year="2020-2021",
        age="4-5 years old (as of 2025)",
        original_msrp="$1,799 - $2,099",
        exact_match=("Lowe's", "$1,899"),
        comparable=(("Home Depot", "$1,998"), ("Best Buy", "$2,099"), ("Lowe's", "$1,849")),
    ),
    ItemCategory.WASHER: DemoProfile(
        description_template=(
            "{brand} {model} is a front-load washer with steam cleaning capability and vibration reduction "
            "technology. It offers multiple wash cycles including sanitize and allergen settings. This unit "
            "was marketed as a high-efficiency model in the mid-range price segment."
        ),
        default_noun="washing machine",
        specifications=(
            "Capacity: 4.5 cu. ft. drum",
            "Spin speed: Up to 1,200 RPM",
            "Energy Star certified — uses approximately 15 gallons per cycle",
            "Steam cleaning and sanitize cycle",
            "10+ wash cycles including delicates, heavy duty, and quick wash",
        ),
        year="2021-2022",
        age="3-4 years old (as of 2025)",
        original_msrp="$849 - $999",
        exact_match=("Home Depot", "$899"),
        comparable=(("Lowe's", "$949"), ("Best Buy", "$899"), ("Home Depot", "$999")),
    ),
    ItemCategory.DRYER: DemoProfile(
        description_template=(
            "{brand} {model} is an electric dryer with sensor dry technology and a large-capacity drum. "
            "It features multiple drying cycles and a wrinkle-prevention option. Positioned in the "
            "mid-range of the manufacturer's laundry lineup."
        ),
        default_noun="dryer",
        specifications=(
            "Capacity: 7.4 cu. ft. drum",
            "Electric, 240V connection",
            "Sensor dry technology with moisture sensors",
            "Steam refresh cycle",
            "12 drying cycles including air dry, delicates, and heavy duty",
        ),
        year="2021-2022",
        age="3-4 years old (as of 2025)",
        original_msrp="$749 - $899",
        comparable=(("Lowe's", "$849"), ("Best Buy", "$799"), ("Home Depot", "$899")),
    ),
    ItemCategory.DISHWASHER: DemoProfile(
        description_template=(
            "{brand} {model} is a built-in dishwasher with a stainless steel tub and third rack for "
            "utensils. It features quiet operation and multiple wash cycle options. A solid mid-range "
            "model with good capacity and efficiency."
        ),
        default_noun="dishwasher",
        specifications=(
            "Place settings: 14",
            "Noise level: 44 dBA",
            "Stainless steel interior tub",
            "Third rack for flatware and utensils",
            "Energy Star certified — estimated 269 kWh/year",
        ),
        year="2022",
        age="3 years old (as of 2025)",
        original_msrp="$649 - $799",
        exact_match=("Best Buy", "$749"),
        comparable=(("Lowe's", "$699"), ("Home Depot", "$749")),
    ),
    ItemCategory.TV: DemoProfile(
        description_template=(
            "{brand} {model} is a 4K UHD Smart TV with HDR support and built-in streaming apps. It "
            "features a sleek design with thin bezels and supports both Wi-Fi and Bluetooth "
            "connectivity. Positioned as a popular mainstream model."
        ),
        default_noun="television",
        specifications=(
            'Display: 55" 4K UHD (3840 x 2160)',
            "HDR10 and HLG support",
            "Smart TV platform with built-in streaming apps",
            "Refresh rate: 60Hz native (120Hz motion processing)",
            "3 HDMI ports, 2 USB ports, Wi-Fi 5, Bluetooth 5.0",
        ),
        year="2022-2023",
        age="2-3 years old (as of 2025)",
        original_msrp="$549 - $699",
        comparable=(("Best Buy", "$449"), ("Amazon", "$429"), ("Walmart", "$398")),
    ),
    ItemCategory.LAPTOP: DemoProfile(
        description_template=(
            "{brand} {model} is a portable computer designed for everyday productivity and light "
            "multimedia use. It features a modern processor, solid-state storage, and a full HD "
            "display. A reliable mid-range option for home and office use."
        ),
        default_noun="laptop",
        specifications=(
            "Processor: Intel Core i5 / AMD Ryzen 5 (11th/12th Gen equivalent)",
            "Memory: 8GB DDR4 RAM",
            "Storage: 256GB NVMe SSD",
            'Display: 15.6" FHD (1920 x 1080) IPS',
            "Battery life: Up to 8 hours, USB-C charging supported",
        ),
        year="2022-2023",
        age="2-3 years old (as of 2025)",
        original_msrp="$599 - $749",
        comparable=(("Best Buy", "$599"), ("Amazon", "$549"), ("Walmart", "$529")),
    ),
})

GENERIC_PROFILE = GenericDemoProfile(
    description_template=(
        "is an appliance or electronic device. Based on the limited information provided, this appears "
        "to be a standard consumer-grade product. More specific details require additional identifying "
        "information such as brand and model number."
    ),
    specifications=(
        "Category: General appliance/electronic",
        "Further specifications require brand and model number",
        "Check the item's label or manual for detailed specs",
    ),
    year="2020-2023",
    age="2-5 years old (estimated, as of 2025)",
    original_msrp="$200 - $1,500 (broad estimate without model info)",
    comparable=(("Best Buy", "$300 - $1,200"), ("Amazon", "$250 - $1,100")),
)


def get_demo_profile(category: ItemCategory | str) -> DemoProfile:
    """Look up the canned profile for a category, falling back to the generic one."""
    try:
        category = ItemCategory(category)
    except ValueError:
        return GENERIC_PROFILE
    return DEMO_PROFILES.get(category, GENERIC_PROFILE)
