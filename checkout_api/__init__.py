"""Service de checkout: validation du panier, réconciliation du total et autorisation Stripe."""
