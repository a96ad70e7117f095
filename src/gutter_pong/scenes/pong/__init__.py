"""
Pong scene: world model, simulation systems and the runtime adapter.
"""
