"""LOOT Manager - game discovery and session state for the LOOT load order tool.

This package provides the headless core that the LOOT user interface sits on:
    - Discovery of installed games via user overrides, the Windows Registry
      and Microsoft Store / Xbox app installs (.GamingRoot manifests)
    - Filesystem-consistent, case-insensitive filename comparison
    - A thread-safe session state object that sequences startup
    - A counter of unapplied UI edits shared between widgets

Package Structure:
    app: Application entry point and composition root
    config: Settings persistence, data paths, schemas and default games
    core: Drive enumeration, manifest parsing, registry access, game
        location and the LootState orchestrator
    gui: Startup status window (CustomTkinter)

Quick Start:
    Run from command line::

        python -m loot_manager.app --game "Skyrim Special Edition"

    Or programmatically::

        from loot_manager.config.paths import LootPaths
        from loot_manager.core.state import LootState

        state = LootState(LootPaths.default())
        state.init()
        print(state.get_current_game().settings.name)

Configuration:
    - Settings file: <local app data>/LOOT/settings.xml
    - Log file: <local app data>/LOOT/LOOTDebugLog.txt
    - Prelude directory: <local app data>/LOOT/prelude
"""

__version__ = "0.19.0"
__app_name__ = "LOOT"
