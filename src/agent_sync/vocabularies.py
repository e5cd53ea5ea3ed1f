"""Allowed values for the enumerated CRM properties."""

OTHER = "other"

INDUSTRIES = frozenset({"saas", "ecommerce", "manufacturing", "healthcare", "finance", OTHER})
INTEGRATIONS = frozenset({"salesforce", "shopify", "netsuite", "slack", OTHER})
COMPLIANCE = frozenset({"gdpr", "soc2", "hipaa", OTHER})
# No "other" here; unknown tiers still map to it
PRICE_TIERS = frozenset({"free", "trial", "standard", "enterprise"})
