"""
Feedback reporting service
"""
