"""
Paddle controllers: keyboard mapping for the player, tracking for the CPU.
"""
