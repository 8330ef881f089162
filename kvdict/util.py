class UNSET:
    def __repr__(self):
        return "UNSET"

    def __eq__(self, other):
        return other.__class__ == self.__class__

    def __hash__(self):
        return hash(self.__class__)


UNSET = UNSET()


def is_hashable(value) -> bool:
    try:
        hash(value)
    except TypeError:
        return False
    return True
