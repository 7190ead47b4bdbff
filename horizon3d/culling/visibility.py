"""
Результат проверки видимости с тремя состояниями.
"""

from enum import IntEnum


class Visibility(IntEnum):
    """OCCLUDED / INDETERMINATE / VISIBLE.

    INDETERMINATE – камера не снаружи эллипсоида или точка не конечна:
    геометрия горизонта для такого случая не определена.
    """
    OCCLUDED = -1
    INDETERMINATE = 0
    VISIBLE = 1

    @property
    def is_visible(self) -> bool:
        return self is Visibility.VISIBLE
