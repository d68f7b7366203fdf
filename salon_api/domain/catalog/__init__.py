"""Catalog domain - bookable salon services"""
