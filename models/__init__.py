from models.cors_policy import CorsPolicy, CorsSettings, DEFAULT_ORIGIN, POLICY_NAME

__all__ = ["CorsPolicy", "CorsSettings", "DEFAULT_ORIGIN", "POLICY_NAME"]
