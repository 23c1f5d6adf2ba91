from enum import Enum

__all__ = ['QuadratureFamily', 'make_family']


class QuadratureFamily(Enum):
    """Gauss-type node sets, differing in which endpoints of [-1,1] are fixed nodes"""
    GAUSS = 'gauss'
    GAUSS_RADAU_LEFT = 'gauss-radau-left'
    GAUSS_RADAU_RIGHT = 'gauss-radau-right'
    GAUSS_LOBATTO = 'gauss-lobatto'

    @property
    def fixes_left(self):
        return self in (QuadratureFamily.GAUSS_RADAU_LEFT, QuadratureFamily.GAUSS_LOBATTO)

    @property
    def fixes_right(self):
        return self in (QuadratureFamily.GAUSS_RADAU_RIGHT, QuadratureFamily.GAUSS_LOBATTO)


def make_family(family):
    if isinstance(family, QuadratureFamily):
        return family
    try:
        return QuadratureFamily(family)
    except ValueError:
        names = [f.value for f in QuadratureFamily]
        raise ValueError(f'Unknown quadrature family {family!r}, must be one of {names}') from None
