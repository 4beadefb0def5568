"""Validation, formulas and formatting shared by the calculator endpoints"""
