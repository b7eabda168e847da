"""
Reset Focus Timer settings by deleting the saved settings file.
The next launch falls back to a 25 minute focus session.
"""

import os
from BackEnd.core.paths import settings_path, log_path

def reset_settings():
    """Delete the settings file after confirmation."""
    settings_file = settings_path()

    if settings_file.exists():
        print(f"Found settings at: {settings_file}")

        confirm = input("Are you sure you want to reset your settings? (yes/no): ")

        if confirm.lower() in ['yes', 'y']:
            try:
                os.remove(settings_file)
                print("Settings deleted. Defaults apply on next launch.")
            except OSError as e:
                print(f"Error deleting settings: {e}")
        else:
            print("Reset cancelled.")
    else:
        print("No settings found. Defaults are already in use.")

    # Also offer to clear the log file
    log_file = log_path()
    if log_file.exists():
        confirm_log = input("\nAlso delete the log file? (yes/no): ")
        if confirm_log.lower() in ['yes', 'y']:
            try:
                os.remove(log_file)
                print("Log file deleted.")
            except OSError as e:
                print(f"Error deleting log file: {e}")

if __name__ == "__main__":
    print("=" * 50)
    print("Focus Timer - Reset Settings")
    print("=" * 50)
    reset_settings()
