from pathlib import Path

from ts2589_fix.rewriter import MARKER

INTERNAL_IMPORT = 'import { internal } from "../_generated/api";'
API_IMPORT = 'import { api } from "../_generated/api";'
COMBINED_IMPORT = 'import { api, internal } from "./_generated/api.js";'

QUERY_BODY = """
export const list = query({
  handler: async (ctx) => {
    return await ctx.db.query("messages").collect();
  },
});
"""


def get_sample_source(type):
    sample_sources = {
        "internal": f"""import {{ v }} from "convex/values";
{INTERNAL_IMPORT}
import {{ mutation }} from "../_generated/server";

export const send = mutation({{
  args: {{ body: v.string() }},
  handler: async (ctx, args) => {{
    await ctx.scheduler.runAfter(0, internal.messages.notify, args);
  }},
}});
""",
        "combined": f"""{COMBINED_IMPORT}
import {{ action }} from "./_generated/server";

export const sync = action({{
  handler: async (ctx) => {{
    await ctx.runQuery(api.messages.list);
    await ctx.runMutation(internal.messages.clear);
  }},
}});
""",
        "separate": f"""{INTERNAL_IMPORT}
import {{ query }} from "../_generated/server";
{API_IMPORT}
""" + QUERY_BODY,
        "unrelated": """import { query } from "./_generated/server";
import { internalFoo } from "../_generated/api";
""" + QUERY_BODY,
        "patched": f"""// {MARKER} by using require() which doesn't trigger type inference
const internal = require('../_generated/api.js').internal as any;
{INTERNAL_IMPORT}
""",
    }

    return sample_sources[type]


def write_tree(root: Path, files: dict[str, str]) -> Path:
    """Create `files` (relative path -> contents) under `root` and return `root`."""
    for rel_path, contents in files.items():
        path = root / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(contents, encoding="utf-8")
    return root
