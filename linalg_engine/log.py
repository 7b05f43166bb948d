"""
Accumulating LaTeX logger stack used by the worked-solution output.

Messages carry a level. ``RESULT`` (0) is for headline values such as a
final determinant or solution; ``STEP`` (1) is for intermediate working,
such as a single row operation or one term of a cofactor expansion. A
logger keeps a message only when its level is at most the logger's
``level_limit``, so ``Logger(level_limit=RESULT)`` records results and drops
the working.

Loggers form a stack with ``global_logger`` at the bottom; ``log`` always
writes to the innermost one.
"""

from .fmt import pcformat

RESULT = 0
STEP = 1


class Logger:
    accum: list[str]
    level_limit: int = RESULT
    auto_print: bool = False

    def __init__(self, accum: list[str] = None, level_limit: int = STEP):
        self.accum = accum if accum is not None else []
        self.level_limit = level_limit

    def log(self, message: str, level: int = RESULT):
        if level > self.level_limit:
            return
        self.accum.append(message)
        if self.auto_print:
            print(message)

    def clear(self):
        self.accum.clear()

    def __str__(self):
        return "\n".join(self.accum)


def push_logger(logger=None):
    global current_logger
    if logger is None:
        logger = Logger()
    logger_stack.append(logger)
    current_logger = logger_stack[-1]


def pop_logger() -> Logger:
    global current_logger
    if len(logger_stack) <= 1:
        raise ValueError("No logger to pop")
    ret = logger_stack.pop()
    current_logger = logger_stack[-1]
    return ret


def log(message: str, *args, level: int = RESULT):
    raw_log(pcformat(message, *args), level=level)


def log_step(message: str, *args):
    log(message, *args, level=STEP)


def raw_log(message: str, level: int = RESULT):
    current_logger.log(message, level)


def ignore_log(f):
    with nest_logger():
        return f()


class LoggerGuard:
    def __init__(self, logger=None, append_logs: list[str] = None):
        self.logger = logger
        self.append_logs = append_logs

    def __enter__(self):
        push_logger(self.logger)
        return current_logger

    def __exit__(self, exc_type, exc_val, exc_tb):
        lg = pop_logger()
        if self.append_logs is not None:
            if len(lg.accum) > 0:
                self.append_logs.append(str(lg))
        return False


def nest_logger(logger=None):
    return LoggerGuard(logger)


def nest_appending_logger(logs_list: list[str]):
    return LoggerGuard(append_logs=logs_list)


def capture_logs(f) -> str:
    with nest_logger() as lg:
        f()
    return str(lg)


current_logger = None
logger_stack = []
global_logger = Logger()
push_logger(global_logger)
