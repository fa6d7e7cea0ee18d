# -----------------------------------------------------------------------------
# /*
#  * Copyright (C) 2025 CodeStory
#  *
#  * This program is free software; you can redistribute it and/or modify
#  * it under the terms of the GNU General Public License as published by
#  * the Free Software Foundation; Version 2.
#  *
#  * This program is distributed in the hope that it will be useful,
#  * but WITHOUT ANY WARRANTY; without even the implied warranty of
#  * MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
#  * GNU General Public License for more details.
#  *
#  * You should have received a copy of the GNU General Public License
#  * along with this program; if not, you can contact us at support@codestory.build
#  */
# -----------------------------------------------------------------------------

from pathlib import Path

from platformdirs import user_config_dir, user_log_path

APP_NAME = "gutterdiff"
ENV_APP_PREFIX = APP_NAME.upper() + "_"
LOG_DIR = Path(user_log_path(appname=APP_NAME))

CONFIG_FILENAME = "gutterdiff.toml"

GLOBAL_CONFIG_FILE = Path(user_config_dir(APP_NAME)) / CONFIG_FILENAME
LOCAL_CONFIG_FILE = Path(CONFIG_FILENAME)

# patches are only applied locally, so the index line never names real objects
PLACEHOLDER_INDEX_HASH = "000000"
NO_NEWLINE_MARKER = "\\ No newline at end of file"

DEFAULT_FILE_MODE = "100644"

# highlight groups handed to the preview renderer
HL_ADD_PREVIEW = "GitSignsAddPreview"
HL_DELETE_PREVIEW = "GitSignsDeletePreview"
HL_ADD_INLINE = "GitSignsAddInline"
HL_DELETE_INLINE = "GitSignsDeleteInline"
