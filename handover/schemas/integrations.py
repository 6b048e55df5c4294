"""Third-party integrations catalogue offered in integration pickers."""

from pydantic import Field

from .base import DocumentModel


class Integration(DocumentModel):
    id: str = Field(..., min_length=1)
    name: str
    category: str = ""
    scope: str = ""
    limitations: str = ""
    requirements: list[str] = Field(
        default_factory=list,
        description="What the merchant must provide before the integration can go live",
    )
    documentation_link: str = ""


def default_integrations() -> list[Integration]:
    """Catalogue used until one is saved in settings."""
    return [
        Integration(
            id="razorpay",
            name="Razorpay",
            category="Payments",
            scope="Checkout payments inside the app",
            requirements=["Razorpay key ID", "Razorpay key secret"],
            documentation_link="https://razorpay.com/docs/",
        ),
        Integration(
            id="klaviyo",
            name="Klaviyo",
            category="Marketing",
            scope="Customer profiles and push/email flows",
            requirements=["Klaviyo public API key"],
            documentation_link="https://developers.klaviyo.com/",
        ),
        Integration(
            id="judgeme",
            name="Judge.me",
            category="Reviews",
            scope="Product reviews on product pages",
            limitations="Review submission with photos is not supported",
            requirements=["Judge.me public token"],
            documentation_link="https://judge.me/api/docs",
        ),
        Integration(
            id="google-analytics",
            name="Google Analytics (Firebase)",
            category="Analytics",
            scope="App usage and e-commerce events",
            requirements=["Firebase project access"],
            documentation_link="https://firebase.google.com/docs/analytics",
        ),
    ]
