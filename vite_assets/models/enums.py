from enum import Enum


class StrictnessPolicy(str, Enum):
    STRICT = "strict"
    LENIENT = "lenient"

    @classmethod
    def from_debug(cls, debug: bool) -> "StrictnessPolicy":
        return cls.STRICT if debug else cls.LENIENT

    def raises(self, allow_missing: bool = False) -> bool:
        """
        Whether a missing manifest, entry or property should surface as an
        error. A caller opting into ``allow_missing`` always gets silence.
        """
        return not allow_missing and self is StrictnessPolicy.STRICT


class RootKind(str, Enum):
    INDEX = "index"
    BASE = "base"
    CONFIG = "config"
