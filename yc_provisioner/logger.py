import sys
from pathlib import Path

from loguru import logger


def enrich_record(record):
    # 计算相对路径
    file_path = Path(record["file"].path)
    try:
        relative_path = file_path.relative_to(Path.cwd())
    except ValueError:
        relative_path = file_path
    record["extra"]["rel_path"] = str(relative_path)
    return True


def configure_logger(level: str = "INFO"):
    logger.remove()
    logger.add(
        sys.stderr,
        level=level.upper(),
        format="<green>{time:YYYY-MM-DD HH:mm:ss.SSSSSS}</green> | <level>{level: <8}</level> | <cyan>{extra[rel_path]}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        colorize=True,
        filter=enrich_record,
    )
