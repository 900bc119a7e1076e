"""
Core building blocks shared by the configuration modules: enums and exceptions.
"""
