"""Alpha Insights Sales Bot backend"""
