import pytest

from helpers import get_sample_source, write_tree


@pytest.fixture
def convex_dir(tmp_path):
    return write_tree(
        tmp_path / "convex",
        {
            "messages.ts": get_sample_source("internal"),
            "sync.ts": get_sample_source("combined"),
            "nested/deep/feed.ts": get_sample_source("separate"),
            "plain.ts": get_sample_source("unrelated"),
            "done.ts": get_sample_source("patched"),
            "_generated/api.ts": 'import { internal } from "../_generated/api";\n',
            "_generated/api.js": "module.exports = {};\n",
            "node_modules/pkg/index.ts": 'import { api } from "../_generated/api";\n',
            "README.md": "not typescript\n",
        },
    )
