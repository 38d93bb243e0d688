import os


def get_settings_module() -> str:
    # APP_ENV picks the settings module, 'development' by default
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "guard_payroll.config.production"

    if env in {"test", "testing"}:
        return "guard_payroll.config.testing"

    return "guard_payroll.config.development"
