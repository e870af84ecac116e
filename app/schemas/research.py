from typing import Literal

from pydantic import BaseModel, Field

from app.schemas.category import ItemCategory

ConfidenceLevel = Literal["high", "medium", "low"]
CONFIDENCE_LEVELS: tuple[str, ...] = ("high", "medium", "low")


class SearchInput(BaseModel):
    brand: str = ""
    model: str = ""
    serial: str = ""
    description: str = ""
    category: ItemCategory | Literal[""] = ""

    model_config = {"frozen": True, "str_strip_whitespace": True}

    @property
    def category_value(self) -> str:
        if isinstance(self.category, ItemCategory):
            return self.category.value
        return self.category

    def has_identifying_info(self) -> bool:
        return any((self.brand, self.model, self.serial, self.description))

    def supplied_fields(self) -> list[str]:
        return [name for name, value in self.model_dump().items() if value]


class PricingSource(BaseModel):
    retailer: str
    price: str  # free-form, e.g. "$1,899" or "$300 - $1,200"
    isExactMatch: bool
    url: str | None = None


class AgeEstimate(BaseModel):
    estimatedYear: str = "Unknown"
    estimatedAge: str = "Unknown"
    source: str = "Unable to determine"
    confidence: ConfidenceLevel = "low"


class CurrentReplacement(BaseModel):
    sameModel: list[PricingSource] = Field(default_factory=list)
    comparable: list[PricingSource] = Field(default_factory=list)


class ResultConfidence(BaseModel):
    level: ConfidenceLevel = "low"
    explanation: str = "Limited information provided."
    suggestions: list[str] = Field(default_factory=list)


class ResearchResult(BaseModel):
    itemName: str = "Unknown Item"
    description: str = "No description available."
    specifications: list[str] = Field(default_factory=list)
    ageEstimate: AgeEstimate = Field(default_factory=AgeEstimate)
    originalMSRP: str = "Unknown"
    currentReplacement: CurrentReplacement = Field(default_factory=CurrentReplacement)
    confidence: ResultConfidence = Field(default_factory=ResultConfidence)
    searchTermUsed: str = ""


class ErrorResponse(BaseModel):
    error: str
