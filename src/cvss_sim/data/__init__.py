"""Static dashboard and knowledge base content"""
