"""Demo – two customer services wired through one dispatcher."""
from mp_mediator.demo.customers import (
    DOWNLOAD_CUSTOMER_SERVICE,
    GET_CUSTOMER_SERVICE,
    DownloadCustomerHandler,
    DownloadCustomerMessageBody,
    GetCustomerHandler,
    GetCustomerMessageBody,
    build_dispatcher,
    main,
    run,
)

__all__ = [
    "DOWNLOAD_CUSTOMER_SERVICE",
    "GET_CUSTOMER_SERVICE",
    "DownloadCustomerHandler",
    "DownloadCustomerMessageBody",
    "GetCustomerHandler",
    "GetCustomerMessageBody",
    "build_dispatcher",
    "main",
    "run",
]
