"""
Response extraction engine.

Responsibilities:
- Split the provider's free-text answer into candidate place blocks.
- Recover labelled fields (name, category, address, rating, review) per block.
- Pair each place with a grounding citation link for its map URL.
- Synthesize places from citation links when no block is recoverable.
"""
