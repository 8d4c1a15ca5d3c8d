import argparse
import sys
from typing import List, Optional

from dotenv import find_dotenv, load_dotenv
from loguru import logger

from ..errors import ProvisioningError
from ..logger import configure_logger
from .credentials import Credentials
from .instance_provisioner import provision
from .provision_config import load_provision_config


def make_parser():
    parser = argparse.ArgumentParser(description="在 Yandex Cloud 创建单个虚拟机实例")
    parser.add_argument(
        "-c", "--config",
        type=str,
        default="./config.json",
        help="实例配置文件路径 (.json 或 .toml)"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="日志级别"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = make_parser().parse_args(argv)

    load_dotenv(find_dotenv(usecwd=True))
    configure_logger(args.log_level)

    try:
        config = load_provision_config(args.config)
        credentials = Credentials.load_from_env()
        handle = provision(config, credentials)
    except ProvisioningError as e:
        logger.error(f"Provisioning failed: {e}")
        return 1

    print(f"Running Yandex.Cloud operation. ID: {handle.operation_id}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
