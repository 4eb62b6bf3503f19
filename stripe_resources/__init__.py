"""Typed bindings for the Stripe bitcoin receivers and cards APIs.

    from stripe_resources import card
    from stripe_resources.core import Backend

    client = card.Client(Backend('https://api.stripe.com/v1'), 'sk_test_...')
    client.get('card_123', card.CardParams(customer='cus_123'))
"""
__version__ = '0.1.0'
