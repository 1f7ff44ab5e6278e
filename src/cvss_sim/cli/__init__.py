"""CVSS Simulator command line interface"""
