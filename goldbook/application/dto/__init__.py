"""Data Transfer Objects for API layer.

Request DTOs: Validate and parse incoming API requests.
Response DTOs: Structure and serialize API responses.

These are the ONLY contracts between API handlers and use cases.
"""

from goldbook.application.dto.requests import (
    ApplyPaymentRequest,
    CreateTraderRequest,
    CustomerRequest,
    GeneralTransactionRequest,
    InvoiceItemRequest,
    InvoicePaymentRequest,
    SaveInvoiceRequest,
    TraderTransactionRequest,
    UpdateTraderRequest,
    UpdateTraderTransactionRequest,
)
from goldbook.application.dto.responses import (
    ComponentHealthResponse,
    CustomerResponse,
    DashboardResponse,
    DeleteRecordResponse,
    DeleteTraderResponse,
    ErrorResponse,
    HealthResponse,
    InvoiceItemResponse,
    InvoiceListResponse,
    InvoiceMessageResponse,
    InvoiceResponse,
    LogEntryResponse,
    LogResponse,
    PaymentResponse,
    TraderAccountResponse,
    TraderAccountsResponse,
    TraderDetailResponse,
    TraderResponse,
    TraderTransactionResponse,
    TransactionResponse,
    TreasuryResponse,
    TrendResponse,
    WalletsResponse,
)

__all__ = [
    # Requests
    "SaveInvoiceRequest",
    "InvoiceItemRequest",
    "InvoicePaymentRequest",
    "CustomerRequest",
    "ApplyPaymentRequest",
    "CreateTraderRequest",
    "UpdateTraderRequest",
    "TraderTransactionRequest",
    "UpdateTraderTransactionRequest",
    "GeneralTransactionRequest",
    # Responses
    "InvoiceResponse",
    "InvoiceItemResponse",
    "InvoiceListResponse",
    "InvoiceMessageResponse",
    "CustomerResponse",
    "PaymentResponse",
    "TraderResponse",
    "TraderTransactionResponse",
    "TraderAccountResponse",
    "TraderAccountsResponse",
    "TraderDetailResponse",
    "DeleteTraderResponse",
    "TransactionResponse",
    "WalletsResponse",
    "TreasuryResponse",
    "DashboardResponse",
    "TrendResponse",
    "LogEntryResponse",
    "LogResponse",
    "DeleteRecordResponse",
    "ComponentHealthResponse",
    "HealthResponse",
    "ErrorResponse",
]
