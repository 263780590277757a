"""
Sérialisation des métadonnées Stripe (requestId, orderItems, client optionnel).
"""
import json
from typing import Dict, Optional, Sequence

from .cart import CartLineItem

# module checkout_api.payments.metadata
def project_order_items(items: Sequence[CartLineItem]) -> str:
    """
    Projette le panier vers le JSON compact attendu dans metadata.orderItems.
    - Un objet {templateId, tier, quantity, unitPrice} par ligne, dans l'ordre d'entrée.
    - Déterministe: même panier => mêmes octets.
    """
    return json.dumps([item.to_metadata() for item in items], separators=(",", ":"))

def make_metadata(
    request_id: str,
    items: Sequence[CartLineItem],
    customer_email: Optional[str] = None,
    customer_name: Optional[str] = None,
) -> Dict[str, str]:
    """
    Assemble les métadonnées envoyées avec le PaymentIntent.
    - customerEmail/customerName ne sont ajoutés que s'ils sont fournis (chaînes non vides).
    """
    metadata = {
        "requestId": request_id,
        "orderItems": project_order_items(items),
    }
    if customer_email:
        metadata["customerEmail"] = customer_email
    if customer_name:
        metadata["customerName"] = customer_name
    return metadata
