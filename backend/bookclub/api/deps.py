from ..services.calculator import AwardCalculator, build_calculator


def get_calculator() -> AwardCalculator:
    """FastAPI dependency; tests swap it via ``app.dependency_overrides``."""
    return build_calculator()
