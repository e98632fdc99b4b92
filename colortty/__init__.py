"""colortty — terminal colour scheme converter (iTerm2 / mintty → Alacritty)."""
