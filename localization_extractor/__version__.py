"""Version information for localization-extractor."""

__version__ = "1.4.0"
__author__ = "Mohammed Souiden"
__description__ = "Extract localization keys from source code and regenerate .strings catalogs"

# Changelog:
# 1.4.0 - Background runs and last-run cache
#       - ExtractionEngine.run_in_background returns a Future[RunResult]
#       - last_result is swapped under a lock after each run
#       - LogStream replaces the raw log callback (callback still supported)
#       - Optional threaded extraction with ordered fan-in merge
#
# 1.3.0 - Comment tracking
#       - extract_keys_with_comments with key fallback for empty comments
#       - Catalogs can embed /* comment */ blocks above each entry
#       - Comment changes are reported in the change summary
#       - Origin file kept as a separate field, not a text prefix
#
# 1.2.0 - Change summary
#       - New / missing / changed / excluded keys per language
#       - .stringsdict keys are excluded from flat catalogs
#       - Console, JSON and Markdown reports
#
# 1.1.0 - Pattern generator
#       - Patterns generated from a usage example (.localized, NSLocalizedString, L10n)
#       - Language directory auto-detection (*.lproj)
#
# 1.0.0 - Initial release
#       - Recursive Swift scanning, regex key extraction, .strings regeneration
