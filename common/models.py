from typing import Any

from pydantic import BaseModel, ConfigDict, Field, SkipValidation
from pydantic.alias_generators import to_camel


class ODLModel(BaseModel):
    """Base for ODL records: snake_case attributes, camelCase ODL keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_record(self) -> dict[str, Any]:
        """Plain nested dict keyed by the ODL field names."""
        return self.model_dump(by_alias=True)


class SiteData(ODLModel):
    id: str = Field(..., description="Site identifier")


class PageData(ODLModel):
    type: str = Field(..., description="Page type")
    name: str = Field(..., description="Page name")


class GlobalData(ODLModel):
    site: SiteData
    page: PageData
    user: dict[str, Any] | None = None


class BrandData(ODLModel):
    name: str
    brand_key: str
    line_key: str


class SearchData(ODLModel):
    query: str = Field(..., description="Search term")
    num_hits: int = Field(..., ge=0, description="Number of search hits")
    product_ids: list[int]
    variant_ids: list[int]
    aonrs: list[int]
    eans: list[int]


class CategoryData(ODLModel):
    id: str = Field(..., description="Category path")
    name: str
    product_ids: list[int]
    variant_ids: list[int]
    aonrs: list[int]
    eans: list[int]


class PriceData(ODLModel):
    net: str
    vat: str = Field(..., alias="VAT")
    discount: int
    base: str = Field(..., description="Base price per unit, display formatted")
    original: str
    total: str
    total_before_discount: str


class AddressData(ODLModel):
    zip: str
    town: str
    street: str
    house_nr: str


class CustomerData(ODLModel):
    kundennummer: int = Field(..., description="Customer number")
    zip_town: str
    loginstatus: str
    salutation: str
    first_name: str
    last_name: str
    age: int
    birth_date: int
    birth_year: int
    kundentyp: str = Field(..., description="Customer type")
    email: str
    phone: str
    billing_address: AddressData
    shipping_address: AddressData


class ProductData(ODLModel):
    ean: int
    aonr: int
    product_id: int
    variant_id: int
    name: str
    brand: str
    brand_data: BrandData
    color: str
    size: str
    abteilung_name: str = Field(..., description="Department name")
    abteilung_nummer: int = Field(..., description="Department number")
    in_stock: bool
    price_data: PriceData
    # not in the ODL schema but present in live data
    category: str
    # legacy
    price: str
    vat: str = Field(..., alias="VAT")
    discount: int


class CartProductData(ProductData):
    quantity: int = Field(..., ge=1, description="Quantity in cart")


class CartData(ODLModel):
    price: float
    vat: float = Field(..., alias="VAT")
    discount: int
    price_data: PriceData
    shipping: float
    payment_costs: float
    payback_points: int
    # caller-supplied products are kept as given, models or plain records
    products: SkipValidation[list[Any]] = Field(default_factory=list)


class CampaignData(ODLModel):
    campaigns: list[str]
    coupon_campaign_no: str


class OrderData(CartData):
    id: int = Field(..., description="Order identifier")
    payment_method: str
    gift_card_used: bool
    customer: CustomerData
    coupon_code: str
    payback: bool
    campaign_numbers: list[str]
    campaign_data: CampaignData
    test_order: bool
