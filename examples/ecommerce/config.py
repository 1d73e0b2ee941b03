"""Config (env) — user code."""
from structeq import EqualityConfig

settings = EqualityConfig.load_from_env(prefix="ECOMMERCE_EQUALITY_")
