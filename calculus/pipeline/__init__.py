from .config import EngineConfig, GraphConfig, DerivativeResult

__all__ = [
	"EngineConfig", "GraphConfig", "DerivativeResult",
]
