"""Personalized workout and meal plan generation domain."""
