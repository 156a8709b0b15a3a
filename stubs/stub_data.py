"""
Stub data for tests against the Open Data Layer (ODL) schema family.

All stub data lives here so it can be reused across test suites. Factories
that accept a seed scale their numeric values by a reproducible random
factor; without a seed they return fixed baseline values.

Factories log seeded builds at DEBUG. Consuming suites can turn that on
with ``common.config.configure_logging``, which honours ``LOG_LEVEL``.
"""

import logging
import math

from common.models import (
    AddressData,
    BrandData,
    CampaignData,
    CartData,
    CartProductData,
    CategoryData,
    CustomerData,
    GlobalData,
    OrderData,
    PageData,
    PriceData,
    ProductData,
    SearchData,
    SiteData,
)
from common.randomizer import scale_factor, to_fixed

logger = logging.getLogger(__name__)

PRODUCT_IDS = [123, 456, 789, 101]
VARIANT_IDS = [1123, 1456, 1789, 1012]
AONRS = [
    122334400,
    122334411,
    122334422,
    122334433,
    122334444,
    122334455,
    122334466,
    122334477,
    122334488,
    122334499,
]
EANS = [
    4123123123,
    4456456456,
    4789789789,
    4012012012,
    4123123124,
    4456456455,
    4789789786,
    4012012017,
    4123123128,
    4456456459,
]
CAMPAIGNS = ["BLA12345", "BLUBB543"]


def get_global_data_stub(page_type=None, page_name=None, logged_in=False):
    """
    Get global data (site/page/user).

    ``logged_in`` is accepted for callers modelling a login state but does
    not change the output yet: ``user`` is always None.
    """
    return GlobalData(
        site=SiteData(id="jump_dev"),
        page=PageData(
            type="test" if page_type is None else page_type,
            name="Test" if page_name is None else page_name,
        ),
        user=None,
    )


def get_brand_data_stub():
    return BrandData(name="Grand Shizzle Shoes", brand_key="8821", line_key="12345")


def get_search_data_stub():
    return SearchData(
        query="white socks",
        num_hits=4,
        product_ids=list(PRODUCT_IDS),
        variant_ids=list(VARIANT_IDS),
        aonrs=list(AONRS),
        eans=list(EANS),
    )


def get_category_data_stub():
    return CategoryData(
        id="/damen/bekleidung/jeans",
        name="Jeans",
        product_ids=list(PRODUCT_IDS),
        variant_ids=list(VARIANT_IDS),
        aonrs=list(AONRS),
        eans=list(EANS),
    )


def get_price_data_stub(seed=None):
    """Get price data, slightly randomized when a seed is given."""
    rnd = scale_factor(seed)
    if seed is not None:
        logger.debug(f"Building price data stub with seed {seed} (scale {rnd})")

    total = to_fixed(19.99 * rnd)
    return PriceData(
        net=to_fixed(17.77 * rnd),
        vat=to_fixed(2.22 * rnd),
        discount=0,
        base="29,95€/100ml",
        original=to_fixed(29.99 * rnd),
        total=total,
        total_before_discount=total,
    )


def get_customer_data_stub():
    return CustomerData(
        kundennummer=4711,
        zip_town="01705",
        loginstatus="registeredGuest",
        salutation="MR",
        first_name="Hans",
        last_name="Hinkebein",
        age=52,
        birth_date=12,
        birth_year=1965,
        kundentyp="1",
        email="hans.hinkebein@example.com",
        phone="0123-4567890",
        billing_address=AddressData(
            zip="12345",
            town="Berlin",
            street="Evergreen Terrace",
            house_nr="742",
        ),
        shipping_address=AddressData(
            zip="50676",
            town="Köln",
            street="Sesamstr.",
            house_nr="1",
        ),
    )


def get_cart_data_stub(products=None):
    """Get a shopping cart, empty unless products are passed in."""
    return CartData(
        price=74.99,
        vat=12.34,
        discount=0,
        price_data=get_price_data_stub(),
        shipping=4.60,
        payment_costs=1.99,
        payback_points=0,
        products=[] if products is None else products,
    )


def get_order_data_stub(products=None):
    """Get an order built from the cart stub plus order details."""
    fields = dict(get_cart_data_stub(products))
    fields.update(
        id=42,
        payment_method="payPal",
        gift_card_used=False,
        customer=get_customer_data_stub(),
        coupon_code="",
        payback=True,
        payback_points=0,
        campaign_numbers=list(CAMPAIGNS),
        campaign_data=CampaignData(
            campaigns=list(CAMPAIGNS),
            coupon_campaign_no="BLA12345",
        ),
        test_order=False,
    )
    return OrderData(**fields)


def get_product_data_stub(seed=None):
    """
    Get product data, slightly randomized when a seed is given.

    The embedded price data uses the same seed, so product and price
    change together.
    """
    rnd = scale_factor(seed)
    if seed is not None:
        logger.debug(f"Building product data stub with seed {seed} (scale {rnd})")

    return ProductData(
        ean=math.floor(413212345678 * rnd),
        aonr=math.floor(123456789 * rnd),
        product_id=math.floor(123456 * rnd),
        variant_id=math.floor(678901 * rnd),
        name="The Hitchhiker's Towel",
        brand="Hitchhiker's Inc.",
        brand_data=get_brand_data_stub(),
        color="123",
        size="45678",
        abteilung_name="Herren",
        abteilung_nummer=111,
        in_stock=True,
        price_data=get_price_data_stub(seed),
        category="Survival",
        price=to_fixed(42.23 * rnd),
        vat=to_fixed(1.23 * rnd),
        discount=0,
    )


def get_cart_product_data_stub(seed=None):
    product = get_product_data_stub(seed)
    return CartProductData(**dict(product), quantity=1)
