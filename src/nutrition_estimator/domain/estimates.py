"""Domain models for measurements and nutrition estimates."""

from dataclasses import dataclass, field

from nutrition_estimator.domain.nutrition import CanonicalNutrients


@dataclass(frozen=True)
class MeasurementSpec:
    """Parsed portion: quantity, canonical unit and gram equivalent."""

    quantity: float
    unit: str
    grams: float
    reference_serving: str | None = None

    @property
    def label(self) -> str:
        return f"{self.quantity:g} {self.unit} (~{self.grams:g}g)"


@dataclass(frozen=True)
class PortionAssessment:
    """Realism check of a portion against reference serving sizes."""

    is_realistic: bool
    warning: str | None = None
    suggestion: str | None = None
    recommended_serving_grams: float | None = None
    serving_name: str | None = None


@dataclass(frozen=True)
class NutritionEstimate:
    """Calorie and nutrient estimate for one ingredient portion."""

    ingredient: str
    measurement: str
    estimated_calories: int
    equivalent_measurement: str
    note: str
    nutrition_per_100g: CanonicalNutrients
    grams: float
    reference_serving: str | None = None
    portion_info: PortionAssessment | None = None
    is_generic_estimate: bool = False


@dataclass(frozen=True)
class EstimateRequest:
    """One ingredient/measurement pair submitted for estimation."""

    ingredient: str
    measurement: str


@dataclass(frozen=True)
class BatchItemError:
    """Failure placeholder for a single item of a batch."""

    ingredient: str
    error: str


@dataclass
class CacheStats:
    """Counters describing the in-process estimate cache."""

    size: int
    max_entries: int
    ttl_seconds: int
    hits: int = 0
    misses: int = 0
    evictions: int = 0
    popular: list[tuple[str, int]] = field(default_factory=list)
