"""
Module 'payments' (feature-first): intention de paiement Stripe et règlement du panier.
Réunit le client Stripe, le repository BD (payments, settlement_cleanups) et les services.
"""
