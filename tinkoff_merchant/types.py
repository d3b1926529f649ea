"""Request and response schemas of the Tinkoff acquiring API (v2).

Field names follow the wire format exactly, so the dictionaries can be
posted as-is. Nothing here is validated at runtime.
"""
from typing import Any, Literal, NotRequired, TypedDict


ApiMethod = Literal["Init", "GetState", "CheckOrder", "Confirm", "Cancel"]

PaymentStatus = Literal[
    "NEW",
    "AUTHORIZING",
    "AUTHORIZED",
    "AUTH_FAIL",
    "CANCELED",
    "CHECKING",
    "CHECKED",
    "COMPLETING",
    "COMPLETED",
    "CONFIRMING",
    "CONFIRMED",
    "DEADLINE_EXPIRED",
    "FORM_SHOWED",
    "PARTIAL_REFUNDED",
    "PARTIAL_REVERSED",
    "PREAUTHORIZING",
    "PROCESSING",
    "3DS_CHECKING",
    "3DS_CHECKED",
    "REVERSING",
    "REVERSED",
    "REFUNDING",
    "REFUNDED",
    "REJECTED",
    "UNKNOWN",
]

PAYMENT_STATUSES: dict[str, str] = {
    "NEW": "не оплачен",
    "AUTHORIZING": "авторизуется",
    "AUTHORIZED": "оплачен",
    "AUTH_FAIL": "ошибка авторизации",
    "CANCELED": "отменён",
    "CHECKING": "проверяется",
    "CHECKED": "проверен",
    "COMPLETING": "завершается",
    "COMPLETED": "завершён",
    "CONFIRMING": "подтверждается",
    "CONFIRMED": "оплачен",
    "DEADLINE_EXPIRED": "истёк срок оплаты",
    "FORM_SHOWED": "открыта форма оплаты",
    "PARTIAL_REFUNDED": "частично возвращён",
    "PARTIAL_REVERSED": "частично отменён",
    "PREAUTHORIZING": "предавторизация",
    "PROCESSING": "обрабатывается",
    "3DS_CHECKING": "проверка 3-D Secure",
    "3DS_CHECKED": "3-D Secure пройден",
    "REVERSING": "отменяется",
    "REVERSED": "отменён",
    "REFUNDING": "возвращается",
    "REFUNDED": "возвращён",
    "REJECTED": "отклонён",
    "UNKNOWN": "неизвестен",
}

# Статусы, после которых деньги считаются списанными
SUCCESS_STATUSES = frozenset({"CONFIRMED", "AUTHORIZED"})

Taxation = Literal[
    "osn",
    "usn_income",
    "usn_income_outcome",
    "envd",
    "esn",
    "patent",
]

Tax = Literal["none", "vat0", "vat10", "vat20", "vat110", "vat120"]

PaymentMethod = Literal[
    "full_prepayment",
    "prepayment",
    "advance",
    "full_payment",
    "partial_payment",
    "credit",
    "credit_payment",
]

PaymentObject = Literal[
    "commodity",
    "excise",
    "job",
    "service",
    "gambling_bet",
    "gambling_prize",
    "lottery",
    "lottery_prize",
    "intellectual_activity",
    "payment",
    "agent_commission",
    "composite",
    "another",
]

AgentSign = Literal[
    "bank_paying_agent",
    "bank_paying_subagent",
    "paying_agent",
    "paying_subagent",
    "attorney",
    "commission_agent",
    "another",
]

OperationName = Literal["bank_paying_agent", "bank_paying_subagent"]

MarkCodeType = Literal[
    "UNKNOWN",
    "EAN8",
    "EAN13",
    "ITF14",
    "GS10",
    "GS1M",
    "SHORT",
    "FUR",
    "EGAIS20",
    "EGAIS30",
    "RAWCODE",
]

# При рассрочке передаётся TCB / installment, при оплате «Долями» BNPL / BNPL
PaymentRoute = Literal["TCB", "BNPL"]
PaymentSource = Literal["installment", "BNPL"]

# Коды единиц измерения по ОК 015-94 (МК 002-97)
MEASUREMENT_UNIT: dict[str, int] = {
    "piece": 0,
    "gram": 10,
    "kilogram": 11,
    "ton": 12,
    "centimeter": 20,
    "decimeter": 21,
    "meter": 22,
    "square_centimeter": 30,
    "square_decimeter": 31,
    "square_meter": 32,
    "millimeter": 40,
    "liter": 41,
    "cubic_meter": 42,
    "kilowatt_per_hour": 50,
    "gigacalorie": 51,
    "day": 70,
    "hour": 71,
    "minute": 72,
    "second": 73,
    "kilobyte": 80,
    "megabyte": 81,
    "gigabyte": 82,
    "terabyte": 83,
    "other": 255,
}


class AgentData(TypedDict, total=False):
    AgentSign: AgentSign
    OperationName: OperationName
    Phones: list[str]
    ReceiverPhones: list[str]
    TransferPhones: list[str]
    OperatorName: str
    OperatorAddress: str
    OperatorInn: str


class SupplierInfo(TypedDict, total=False):
    # Телефоны в формате +{Ц}, 1-19 символов
    Phones: list[str]
    Name: str
    # ИНН, 10-12 цифр
    Inn: str


class Payments(TypedDict, total=False):
    """Split of the receipt total by payment kind, in kopecks."""

    Cash: int
    Electronic: int
    AdvancePayment: int
    Credit: int
    Provision: int


class Shop(TypedDict):
    ShopCode: str
    Amount: str
    Name: NotRequired[str]
    Fee: NotRequired[str]


class ItemFFD105(TypedDict):
    Name: str
    # Цена за единицу в копейках
    Price: int
    Quantity: float
    # Quantity * Price, в копейках
    Amount: int
    Tax: Tax
    PaymentMethod: NotRequired[PaymentMethod]
    PaymentObject: NotRequired[PaymentObject]
    Ean13: NotRequired[str]
    ShopCode: NotRequired[str]
    AgentData: NotRequired[AgentData]
    SupplierInfo: NotRequired[SupplierInfo]


class ReceiptFFD105(TypedDict):
    """Legacy flat receipt. Either ``Email`` or ``Phone`` must be set."""

    FfdVersion: NotRequired[Literal["1.05"]]
    Taxation: Taxation
    Items: list[ItemFFD105]
    Payments: NotRequired[Payments]
    Email: NotRequired[str]
    Phone: NotRequired[str]


class MarkCode(TypedDict):
    MarkCodeType: MarkCodeType
    value: str


class MarkQuantity(TypedDict):
    numerator: int
    denominator: int


class SectoralItemProps(TypedDict):
    FederalId: str
    Date: str
    Number: str
    Value: str


class ItemFFD12(TypedDict):
    Name: str
    Price: int
    # Целая часть не более 5 знаков, дробная не более 3
    Quantity: float
    Amount: int
    PaymentMethod: PaymentMethod
    PaymentObject: PaymentObject
    Tax: Tax
    # Код из MEASUREMENT_UNIT
    MeasurementUnit: int
    UserData: NotRequired[str]
    Excise: NotRequired[float]
    CountryCode: NotRequired[str]
    DeclarationNumber: NotRequired[str]
    MarkProcessingMode: NotRequired[str]
    MarkCode: NotRequired[MarkCode]
    MarkQuantity: NotRequired[MarkQuantity]
    SectoralItemProps: NotRequired[list[SectoralItemProps]]
    AgentData: NotRequired[AgentData]
    SupplierInfo: NotRequired[SupplierInfo]


class ClientInfo(TypedDict, total=False):
    Birthdate: str
    Citizenship: str
    DocumentCode: str
    DocumentData: str
    Address: str


class OperatingCheckProps(TypedDict):
    Name: str
    Value: str
    Timestamp: str


class SectoralCheckProps(TypedDict):
    FederalId: str
    Date: str
    Number: str
    Value: str


class AddUserProp(TypedDict):
    Name: str
    Value: str


class ReceiptFFD12(TypedDict):
    FfdVersion: Literal["1.2"]
    Taxation: Taxation
    Items: list[ItemFFD12]
    Payments: NotRequired[Payments]
    Email: NotRequired[str]
    Phone: NotRequired[str]
    ClientInfo: NotRequired[ClientInfo]
    Customer: NotRequired[str]
    CustomerInn: NotRequired[str]
    OperatingCheckProps: NotRequired[OperatingCheckProps]
    SectoralCheckProps: NotRequired[SectoralCheckProps]
    AddUserProp: NotRequired[AddUserProp]
    AdditionalCheckProps: NotRequired[dict[str, Any]]


Receipt = ReceiptFFD105 | ReceiptFFD12


class InitParams(TypedDict):
    # Сумма в копейках
    Amount: int
    OrderId: str
    Description: NotRequired[str]
    # Обязателен, если передан Recurrent
    CustomerKey: NotRequired[str]
    Recurrent: NotRequired[str]
    # O - одностадийная оплата, T - двухстадийная
    PayType: NotRequired[Literal["O", "T"]]
    Language: NotRequired[Literal["ru", "en"]]
    NotificationURL: NotRequired[str]
    SuccessURL: NotRequired[str]
    FailURL: NotRequired[str]
    # Формат YYYY-MM-DDTHH24:MI:SS+GMT, от 1 минуты до 90 дней
    RedirectDueDate: NotRequired[str]
    DATA: NotRequired[dict[str, str]]
    # Обязателен, если подключена онлайн-касса
    Receipt: NotRequired[Receipt]


class GetStateParams(TypedDict):
    PaymentId: str
    IP: NotRequired[str]


class CheckOrderParams(TypedDict):
    OrderId: str


class ConfirmParams(TypedDict):
    PaymentId: str
    IP: NotRequired[str]
    Amount: NotRequired[int]
    Receipt: NotRequired[Receipt]
    Shops: NotRequired[list[Shop]]
    Route: NotRequired[PaymentRoute]
    Source: NotRequired[PaymentSource]


class CancelParams(TypedDict):
    PaymentId: str
    IP: NotRequired[str]
    # Если не передана, отменяется вся сумма
    Amount: NotRequired[int]
    Receipt: NotRequired[Receipt]
    Shops: NotRequired[list[Shop]]
    # Код банка в классификации СБП для возврата
    QrMemberId: NotRequired[str]
    Route: NotRequired[PaymentRoute]
    Source: NotRequired[PaymentSource]
    # Идемпотентность возвратов: повторный запрос вернёт текущее состояние
    ExternalRequestId: NotRequired[str]


class _BaseResponse(TypedDict):
    TerminalKey: str
    Success: bool
    ErrorCode: str
    Message: NotRequired[str]
    Details: NotRequired[str]


class InitResponse(_BaseResponse):
    Amount: int
    OrderId: str
    Status: PaymentStatus
    PaymentId: str
    # Только для мерчантов без PCI DSS
    PaymentURL: NotRequired[str]


class GetStateResponse(_BaseResponse):
    Amount: int
    OrderId: str
    Status: PaymentStatus
    PaymentId: str
    Params: NotRequired[list[dict[str, Any]]]


class CheckOrderPayment(TypedDict):
    PaymentId: str
    Amount: NotRequired[int]
    Status: PaymentStatus
    RRN: NotRequired[str]
    Success: bool
    ErrorCode: str
    Message: NotRequired[str]


class CheckOrderResponse(_BaseResponse):
    OrderId: str
    Payments: list[CheckOrderPayment]


class ConfirmResponse(_BaseResponse):
    OrderId: str
    Status: PaymentStatus
    PaymentId: str
    Params: NotRequired[list[dict[str, Any]]]


class CancelResponse(_BaseResponse):
    OrderId: str
    Status: PaymentStatus
    OriginalAmount: int
    NewAmount: int
    PaymentId: str
    ExternalRequestId: NotRequired[str]


class Notification(TypedDict):
    """Body of an inbound payment notification."""

    TerminalKey: str
    OrderId: str
    Success: bool
    Status: PaymentStatus
    PaymentId: int
    ErrorCode: str
    Amount: int
    Token: str
    CardId: NotRequired[int]
    Pan: NotRequired[str]
    ExpDate: NotRequired[str]
    RebillId: NotRequired[int]
    DATA: NotRequired[dict[str, str]]
