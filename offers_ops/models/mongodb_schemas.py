"""MongoDB collection schema definitions and enums"""
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

HEX_COLOR_PATTERN = r"^#([A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})$"


# ============================================================================
# Enums
# ============================================================================

class CheckStatus(str, Enum):
    """Readiness check outcome"""
    PASS = "pass"
    WARNING = "warning"
    FAIL = "fail"


class ExclusiveZone(str, Enum):
    """Audience zones an offer can be restricted to"""
    STUDENT = "student"
    CORPORATE = "corporate"
    WOMEN = "women"
    DEFENCE = "defence"
    HEALTHCARE = "healthcare"
    SENIOR = "senior"


class TargetAudience(str, Enum):
    """Exclusive offer target audience"""
    STUDENT = "student"
    WOMEN = "women"
    BIRTHDAY = "birthday"
    CORPORATE = "corporate"
    FIRST = "first"
    SENIOR = "senior"


class BrandTier(str, Enum):
    """Mall brand tier"""
    STANDARD = "standard"
    PREMIUM = "premium"
    EXCLUSIVE = "exclusive"
    LUXURY = "luxury"


class FlashSaleStatus(str, Enum):
    """Flash sale lifecycle status"""
    SCHEDULED = "scheduled"
    ACTIVE = "active"
    ENDING_SOON = "ending_soon"
    ENDED = "ended"
    SOLD_OUT = "sold_out"


# ============================================================================
# Legacy category metadata rows (categoryvibes, categoryoccasions, categoryhashtags)
# ============================================================================

class LegacyMetadataRow(BaseModel):
    """Bookkeeping fields shared by every legacy metadata row"""
    model_config = ConfigDict(populate_by_name=True, extra="ignore", arbitrary_types_allowed=True)

    row_id: Any = Field(default=None, alias="_id")
    category_slug: str = Field(..., alias="categorySlug")
    sort_order: float = Field(default=0, alias="sortOrder")
    is_active: bool = Field(default=True, alias="isActive")

    @field_validator("sort_order", mode="before")
    @classmethod
    def default_missing_sort_order(cls, v):
        return 0 if v is None else v


class CategoryVibeRow(LegacyMetadataRow):
    id: str
    name: str
    icon: str
    color: str = Field(..., pattern=HEX_COLOR_PATTERN)
    description: Optional[str] = None


class CategoryOccasionRow(LegacyMetadataRow):
    id: str
    name: str
    icon: str
    color: str = Field(..., pattern=HEX_COLOR_PATTERN)
    tag: Optional[str] = None
    discount: float = Field(..., ge=0, le=100)


class CategoryHashtagRow(LegacyMetadataRow):
    id: str
    tag: str
    count: int = Field(default=0, ge=0)
    color: str = Field(..., pattern=HEX_COLOR_PATTERN)
    trending: bool = False


# ============================================================================
# Embedded category metadata (categories.vibes / occasions / trendingHashtags)
# ============================================================================

class EmbeddedVibe(BaseModel):
    id: str
    name: str
    icon: str
    color: str
    description: Optional[str] = None


class EmbeddedOccasion(BaseModel):
    id: str
    name: str
    icon: str
    color: str
    tag: Optional[str] = None
    discount: float


class EmbeddedHashtag(BaseModel):
    id: str
    tag: str
    count: int
    color: str
    trending: bool


# ============================================================================
# Job reports
# ============================================================================

class CheckResult(BaseModel):
    """Outcome of a single readiness check"""
    name: str
    status: CheckStatus
    message: str
    measured: int
    target: int

    @property
    def progress(self) -> Optional[float]:
        """Percentage of target reached, None when the target is zero"""
        if self.target == 0:
            return None
        return round(self.measured / self.target * 100, 1)


class ValidationReport(BaseModel):
    """Ordered readiness checks with aggregate tally"""
    checks: List[CheckResult] = Field(default_factory=list)

    def count(self, status: CheckStatus) -> int:
        return sum(1 for check in self.checks if check.status == status)

    @property
    def passed(self) -> int:
        return self.count(CheckStatus.PASS)

    @property
    def warnings(self) -> int:
        return self.count(CheckStatus.WARNING)

    @property
    def failed(self) -> int:
        return self.count(CheckStatus.FAIL)

    @property
    def exit_code(self) -> int:
        return 1 if self.failed else 0


class CategoryMigration(BaseModel):
    """Per-category item counts written by the consolidation job"""
    slug: str
    vibes: int
    occasions: int
    hashtags: int


class ConsolidationReport(BaseModel):
    """Result of moving legacy metadata rows onto category documents"""
    migrated: List[CategoryMigration] = Field(default_factory=list)
    skipped: List[str] = Field(default_factory=list)
    # Keyed by category _id; slugs are not guaranteed unique
    errors: Dict[str, str] = Field(default_factory=dict)

    @property
    def exit_code(self) -> int:
        return 1 if self.errors else 0
