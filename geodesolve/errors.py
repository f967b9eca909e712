"""Exceptions raised by geodesolve"""

__all__ = ['InvalidArgumentError']


class InvalidArgumentError(ValueError):
    """An argument fell outside of its documented domain"""

    def __init__(self, name: str, value):
        super().__init__(f'invalid argument `{name}`: {value!r}')
        self.name = name
        self.value = value
