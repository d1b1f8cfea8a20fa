"""Console entry points"""
