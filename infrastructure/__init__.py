"""Infrastructure layer - adaptadores externos (Redis, Wablas, hoja de cálculo)"""
