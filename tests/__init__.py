"""
Test Suite Package - Pricing Intelligence Engine
"""
