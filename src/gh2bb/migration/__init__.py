"""Mirror migration workflow."""

from .orchestrator import MigrationResult, MirrorMigration, migrate_repository

__all__ = ['MigrationResult', 'MirrorMigration', 'migrate_repository']
