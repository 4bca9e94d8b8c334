"""rmpatch - checksum-gated binary patching for reMarkable tablets."""
