"""Error types raised while generating study plans."""


class ConfigurationError(RuntimeError):
    """The configured model provider cannot be used (e.g. missing API key)."""


class PlanGenerationError(RuntimeError):
    """Generation failed; no plan is available."""


class ExternalServiceError(PlanGenerationError):
    """The model API call failed or returned nothing."""


class MalformedPlanError(PlanGenerationError):
    """The model response could not be parsed as a study plan."""
