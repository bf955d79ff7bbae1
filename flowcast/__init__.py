"""
Flowcast cycle tracking service.
"""
