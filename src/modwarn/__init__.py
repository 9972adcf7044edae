"""
modwarn - Discord warning ledger

modwarn records moderation warnings issued to members of Discord servers and
keeps each server's history in a single JSON file.

Core Components:

- **Warning Store**: Ordered guild -> user -> warning records with
  find-or-create on insert and read-only lookup
- **Persistence**: Whole-file JSON save/load with typed errors for missing,
  unreadable and malformed files
- **Commands**: /warn and /warnings slash commands for moderators

Usage:
    from modwarn.main import main
    main()  # Loads the warnings file and starts the bot
"""
