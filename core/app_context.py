import logging
from dataclasses import dataclass, field

from core.config_loader import AppConfig
from core.schema import CoefficientSchema, load_schema_file
from core.scorer import ScoringService
from core.cache import ResultsCache

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    """Application context container that holds all wired dependencies.

    The schema is loaded once and shared read-only. The results cache is
    the only mutable state and is owned here instead of living at module
    level.
    """
    config: AppConfig
    schema: CoefficientSchema
    scoring_service: ScoringService
    results_cache: ResultsCache = field(default_factory=ResultsCache)

    @classmethod
    def build(cls, config: AppConfig) -> "AppContext":
        """Build an AppContext from config.

        Args:
            config: Loaded application configuration

        Returns:
            Fully wired AppContext instance

        Raises:
            SchemaError: If the coefficient schema cannot be loaded. The
                application must not start with a partial schema.
        """
        schema = load_schema_file(config.coefficients.path)
        return cls.from_schema(config, schema)

    @classmethod
    def from_schema(cls, config: AppConfig, schema: CoefficientSchema) -> "AppContext":
        """Wire services around an already loaded schema."""
        return cls(
            config=config,
            schema=schema,
            scoring_service=ScoringService(schema),
            results_cache=ResultsCache()
        )
