"""User domain - credential store, signup and login"""
