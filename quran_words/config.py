import os
from dataclasses import dataclass

DEFAULT_CORPUS_PATH = 'data/quraan.txt'
DEFAULT_ALKHALIL_URL = "https://alkhalil-rest-api.onrender.com/analyze"
TRUTHY = {'1', 'true', 'yes', 'on'}


def env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in TRUTHY


@dataclass
class Settings:
    corpus_path: str = DEFAULT_CORPUS_PATH
    use_hybrid_alkhalil: bool = False
    alkhalil_url: str = DEFAULT_ALKHALIL_URL
    log_level: str = 'INFO'

    @classmethod
    def from_env(cls):
        return cls(
            corpus_path=os.getenv("QURAN_CORPUS_PATH", DEFAULT_CORPUS_PATH),
            use_hybrid_alkhalil=env_flag("USE_HYBRID_ALKHALIL"),
            alkhalil_url=os.getenv("ALKHALIL_URL", DEFAULT_ALKHALIL_URL),
            log_level=os.getenv("LOG_LEVEL", 'INFO').upper(),
        )
