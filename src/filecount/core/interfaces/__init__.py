from .logging import LoggerFactoryProtocol, LoggerLikeProtocol
from .pool import WorkerPoolProtocol
from .render import PrinterProtocol
from .task import TaskProtocol
from .walker import WalkerProtocol

__all__ = [
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
    'PrinterProtocol',
    'TaskProtocol',
    'WalkerProtocol',
    'WorkerPoolProtocol',
]
