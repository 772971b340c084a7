from .order import (
    OrderItemInSchemas as OrderItemIn,
    OrderItemSchemas as OrderItem,
    OrderCreateSchemas as OrderCreate,
    OrderCreatedSchemas as OrderCreated,
    OrderUpdateSchemas as OrderUpdate,
    OrderStatusUpdateSchemas as OrderStatusUpdate,
    OrderSchemas as Order,
    OrderTrackingSchemas as OrderTracking,
)
from .cash_session import (
    CashSessionOpenSchemas as CashSessionOpen,
    CashSessionCloseSchemas as CashSessionClose,
    CashSessionSchemas as CashSession,
    CashSessionStatusSchemas as CashSessionStatus,
)
from .address import (
    AddressCreateSchemas as AddressCreate,
    AddressUpdateSchemas as AddressUpdate,
    AddressSchemas as Address,
)
from .customer import CustomerSearchResultSchemas as CustomerSearchResult, AsaasCustomerCreateSchemas as AsaasCustomerCreate
from .charge import ChargeCreateSchemas as ChargeCreate
from .menu import (
    MenuOptionSchemas as MenuOption,
    ChoiceOptionCreateSchemas as ChoiceOptionCreate,
    ChoiceOptionUpdateSchemas as ChoiceOptionUpdate,
    MenuChoiceSchemas as MenuChoice,
    ChoiceGroupCreateSchemas as ChoiceGroupCreate,
    ChoiceGroupUpdateSchemas as ChoiceGroupUpdate,
    MenuItemSchemas as MenuItem,
    ProductCreateSchemas as ProductCreate,
    ProductUpdateSchemas as ProductUpdate,
    ProductMoveSchemas as ProductMove,
    MenuCategorySchemas as MenuCategory,
    CategorySummarySchemas as CategorySummary,
    CategoryCreateSchemas as CategoryCreate,
    CategoryUpdateSchemas as CategoryUpdate,
)
