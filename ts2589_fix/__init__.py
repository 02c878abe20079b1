from ts2589_fix.rewriter import MARKER, Outcome, RewriteResult, rewrite_source

__all__ = ["MARKER", "Outcome", "RewriteResult", "rewrite_source"]
