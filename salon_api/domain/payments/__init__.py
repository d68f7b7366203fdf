"""Payments domain - Stripe gateway adapter"""
