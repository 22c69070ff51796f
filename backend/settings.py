# File: settings.py

import os
from pathlib import Path

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent

class UploadFiles:
    UPLOAD_DIR = Path(os.getenv("UPLOAD_DIR", BASE_DIR / "upload"))
    ALLOWED_SUFFIXES = (".xlsx", ".xlsm")

class SpreadsheetConfig:
    # Column order of the export the import sheets come from
    HEADERS = [
        "域名",
        "建站年龄",
        "记录数",
        "开始时间",
        "结束时间",
        "标题",
        "语言",
        "评分",
        "DNS",
        "注册商",
        "注册商地址",
        "注册人",
        "Email",
        "注册时间",
        "到期时间",
        "更新时间",
        "备案状态",
        "备案时间",
        "备案主体",
        "备案类型",
        "备案号",
        "备案名",
    ]

    DOMAIN_NAME_HEADER = "域名"

    # header -> DomainRecord field; 开始时间/结束时间 are not kept
    FIELD_MAP = {
        "域名": "domain_name",
        "建站年龄": "domain_age",
        "记录数": "order_no",
        "标题": "title",
        "语言": "language",
        "评分": "score",
        "DNS": "dns",
        "注册商": "registrar_name",
        "注册商地址": "registrar_address",
        "注册人": "registrar_by",
        "Email": "email",
        "注册时间": "registrar_at",
        "到期时间": "expire_at",
        "更新时间": "updated_at",
        "备案状态": "record_status",
        "备案时间": "record_at",
        "备案主体": "record_main_body",
        "备案类型": "record_type",
        "备案号": "record_no",
        "备案名": "record_name",
    }

    INTEGER_FIELDS = ("domain_age", "order_no", "score")
    DATETIME_FIELDS = ("registrar_at", "expire_at", "updated_at", "record_at")

    # integer columns hold unsigned bytes in the export
    INTEGER_MIN = 0
    INTEGER_MAX = 255

class DatabaseConfig:
    DATABASE_URL = os.getenv(
        "DATABASE_URL",
        f"sqlite:///{BASE_DIR / 'domain_registry.db'}"
    )
