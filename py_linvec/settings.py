"""Global settings of the py_linvec library"""
import math
from numbers import Real

from py_linvec.exceptions import InvalidArgument
from py_linvec.logger import logger

__all__ = ('Settings', 'DEFAULT_EPS')

DEFAULT_EPS: float = 1e-8


class Settings:  # pylint: disable=too-few-public-methods
    """Global settings class of the py_linvec library

    Attributes:
        EPS: absolute tolerance used by equality, division and normalization checks
    """

    EPS: float = DEFAULT_EPS

    @classmethod
    def set_eps(cls, value: float) -> None:
        """
        EPS setter
        :param value: positive absolute tolerance
        """
        if isinstance(value, bool) or not isinstance(value, Real):
            raise InvalidArgument("EPS has to be a real number", value)
        if not math.isfinite(value) or value <= 0:
            raise InvalidArgument("EPS has to be a positive finite number", value)

        logger.warning("Settings.EPS: change this property "
                       "only if you know what you are doing; "
                       "the tolerance is absolute and applies to every vector")
        cls.EPS = float(value)

    @classmethod
    def get_eps(cls) -> float:
        return cls.EPS

    @classmethod
    def restore_defaults(cls) -> None:
        cls.EPS = DEFAULT_EPS
