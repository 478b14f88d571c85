"""Utility mixin classes"""

__all__ = ['ImmutableMixin']


class ImmutableMixin:  # pylint: disable=too-few-public-methods
    """
    Mixin for value objects whose attributes are fixed once __init__ has
    finished. Subclasses assign their fields through _freeze().
    """

    __slots__ = ()

    def _freeze(self, **fields) -> None:
        """Assigns the final attribute values of the instance"""
        for name, value in fields.items():
            object.__setattr__(self, name, value)

    def __getstate__(self):
        return {
            name: getattr(self, name)
            for klass in type(self).__mro__
            for name in getattr(klass, '__slots__', ())
        }

    def __setstate__(self, state):
        # copy and pickle restore fields here rather than through __setattr__
        self._freeze(**state)

    def __setattr__(self, name, value):
        raise AttributeError(
            f'{self.__class__.__name__} is immutable; cannot set {name!r}'
        )

    def __delattr__(self, name):
        raise AttributeError(
            f'{self.__class__.__name__} is immutable; cannot delete {name!r}'
        )
