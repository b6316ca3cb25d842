"""서브커맨드 모듈.

토큰 빈도를 집계하고 결과를 선택해 출력하는 커맨드 클래스들을 제공한다.
모든 커맨드는 Command 인터페이스를 구현하며, CLI에서 서브커맨드로 호출된다.
"""

from .all_command import AllCommand
from .base import Command
from .bottom_command import BottomCommand
from .counting import CountingCommand
from .dump_command import DumpCommand
from .top_command import TopCommand

__all__ = [
    "Command",
    "CountingCommand",
    "DumpCommand",
    "AllCommand",
    "TopCommand",
    "BottomCommand",
]
