"""Static storefront policy pages."""
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

LAST_UPDATED = "February 2024"


@dataclass(frozen=True)
class Section:
    heading: str
    body: str = ""
    items: Tuple[str, ...] = ()


@dataclass(frozen=True)
class PolicyPage:
    slug: str
    title: str
    sections: Tuple[Section, ...] = field(default_factory=tuple)
    last_updated: str = LAST_UPDATED


PAGES: List[PolicyPage] = [
    PolicyPage(
        slug="privacy-policy",
        title="Privacy Policy",
        sections=(
            Section(
                "Information We Collect",
                "We may collect information about you in a variety of ways, including:",
                (
                    "Personal data: name, email address, phone number, shipping and billing address",
                    "Payment information, processed securely by our payment partner",
                    "Account data: login credentials and profile information",
                    "Usage data: IP address, browser type, pages visited, time spent",
                ),
            ),
            Section(
                "How We Use Your Information",
                items=(
                    "Processing orders and payments",
                    "Delivering products and services",
                    "Sending order confirmations and updates",
                    "Responding to customer inquiries",
                    "Marketing communications, with consent",
                    "Fraud prevention and security",
                ),
            ),
            Section(
                "Third-Party Sharing",
                items=(
                    "Payment processors, for transaction processing",
                    "Logistics partners, for delivery",
                    "Service providers for hosting and analytics",
                    "Legal authorities, if required by law",
                ),
            ),
        ),
    ),
    PolicyPage(
        slug="returns-policy",
        title="Returns & Exchange Policy",
        sections=(
            Section("Return Window", "Products can be returned within 30 days of delivery."),
            Section(
                "Eligibility for Return",
                items=(
                    "Product is in original, unused condition",
                    "All original packaging, tags and accessories are included",
                    "Receipt or order confirmation is provided",
                ),
            ),
            Section(
                "Non-Returnable Items",
                items=(
                    "Custom or personalized furniture",
                    "Clearance or final sale items",
                    "Items used or assembled",
                    "Items with visible damage caused by customer",
                ),
            ),
            Section(
                "Refunds",
                "Refunds are processed within 7-10 business days and credited to the original payment method.",
            ),
        ),
    ),
    PolicyPage(
        slug="shipping-policy",
        title="Shipping & Delivery Policy",
        sections=(
            Section(
                "Delivery Timeline",
                items=(
                    "Metro cities: 5-7 business days",
                    "Major cities: 7-10 business days",
                    "Other locations: 10-14 business days",
                ),
            ),
            Section("Shipping Charges", "Free shipping on orders over ₹499; a flat ₹99 fee applies below that."),
            Section("Order Tracking", "Track any order with its booking ID from the order tracking page."),
            Section(
                "Damaged or Missing Items",
                items=(
                    "Report within 48 hours of delivery",
                    "Provide photographs of the damaged or missing item",
                    "Keep the original packaging and protective materials",
                ),
            ),
            Section("International Shipping", "We currently ship only within India."),
        ),
    ),
    PolicyPage(
        slug="warranty-policy",
        title="Warranty Policy",
        sections=(
            Section("Warranty Coverage", "All furniture carries a 1-year manufacturing defect warranty."),
            Section(
                "What Is Covered",
                items=(
                    "Structural defects in the wooden frame",
                    "Defects in upholstery material",
                    "Defects in hardware, fasteners or metal components",
                    "Manufacturing defects in joints and connections",
                ),
            ),
            Section(
                "What Is Not Covered",
                items=(
                    "Normal wear and tear",
                    "Damage from accidents, misuse or negligence",
                    "Damage from improper assembly or installation",
                    "Fading due to sunlight exposure",
                ),
            ),
            Section(
                "How to Claim Warranty",
                "Report the defect within 30 days of discovery with your order number and photographs.",
            ),
        ),
    ),
    PolicyPage(
        slug="terms-conditions",
        title="Terms & Conditions",
        sections=(
            Section("Agreement to Terms", "By using this website you agree to these terms."),
            Section(
                "Use License",
                "You may not:",
                (
                    "Modify or copy the materials",
                    "Use the materials for any commercial purpose or public display",
                    "Remove any copyright or other proprietary notations",
                ),
            ),
            Section("Product Information", "Colours and finishes may vary slightly from the images shown."),
            Section("Order Acceptance", "We reserve the right to refuse or cancel any order."),
            Section("Governing Law", "These terms are governed by the laws of India."),
        ),
    ),
    PolicyPage(
        slug="faq",
        title="Frequently Asked Questions",
        sections=(
            Section(
                "What types of wood do you use?",
                "Premium solid wood from sustainable forests, including teak, sheesham, mango wood and acacia.",
            ),
            Section(
                "Do you offer customization?",
                "Yes. Dimensions, upholstery colour and wood finish can be customized.",
            ),
            Section(
                "What is your delivery timeline?",
                "Standard delivery takes 5-14 business days depending on your location.",
            ),
            Section(
                "How can I track my order?",
                "Use the booking ID from your confirmation email on the order tracking page.",
            ),
            Section(
                "What is your return policy?",
                "A 30-day return window from the delivery date for unused products in original packaging.",
            ),
            Section(
                "What payment methods do you accept?",
                "Cards, UPI, net banking, wallets and cash on delivery.",
            ),
        ),
    ),
]

PAGES_BY_SLUG: Dict[str, PolicyPage] = {page.slug: page for page in PAGES}


def get_page(slug: str) -> Optional[PolicyPage]:
    return PAGES_BY_SLUG.get((slug or "").strip().lower())
