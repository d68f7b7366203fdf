"""Appointment domain - booking lifecycle"""
