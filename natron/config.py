from pydantic_settings import BaseSettings

# Score -> total XP. 1:1 today; it used to differ, so keep it configurable.
XP_CONVERSION_RATE = 1.0


class NatronSettings(BaseSettings):
    model_config = {"env_prefix": "NATRON_"}

    data_dir: str = "./natron_data"
    xp_conversion_rate: float = XP_CONVERSION_RATE
    investment_xp_reward: int = 10


def get_settings() -> NatronSettings:
    return NatronSettings()


class _LazySettings:
    _instance: NatronSettings | None = None

    def __getattr__(self, name: str):
        if self._instance is None:
            self._instance = get_settings()
        return getattr(self._instance, name)


settings = _LazySettings()
