"""Business domains of the salon API"""
