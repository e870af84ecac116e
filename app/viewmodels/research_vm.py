from dataclasses import dataclass, field

from app.schemas.category import CategoryOption, grouped_category_options
from app.schemas.research import ResearchResult, SearchInput
from app.services.errors import ResearchError
from app.services.research import ResearchService

CONFIDENCE_BADGES: dict[str, str] = {
    "high": "High Confidence",
    "medium": "Medium Confidence",
    "low": "Low Confidence - Estimated",
}


@dataclass
class SearchFormViewModel:
    category_groups: list[tuple[str, list[CategoryOption]]] = field(default_factory=list)
    demo_mode: bool = False

    @classmethod
    def load(cls, demo_mode: bool) -> "SearchFormViewModel":
        return cls(category_groups=grouped_category_options(), demo_mode=demo_mode)


@dataclass
class ResearchViewModel:
    search: SearchInput
    result: ResearchResult | None = None
    error: str | None = None
    status_code: int = 200
    badges: dict[str, str] = field(default_factory=lambda: dict(CONFIDENCE_BADGES))

    @property
    def has_pricing(self) -> bool:
        if not self.result:
            return False
        replacement = self.result.currentReplacement
        return bool(replacement.sameModel or replacement.comparable)

    @classmethod
    async def run(cls, service: ResearchService, search: SearchInput) -> "ResearchViewModel":
        try:
            result = await service.research(search)
        except ResearchError as e:
            return cls(search=search, error=e.message, status_code=e.status_code)
        return cls(search=search, result=result)
