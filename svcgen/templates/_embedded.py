# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

# Generated by scripts/embed_templates.py from templates/sources; do not edit.

TEMPLATES = {
    "README.md": "IyB7eyBtb2RlbC5uYW1lIH19CgpHZW5lcmF0ZWQgUHl0aG9uIGNsaWVudCwgdHlwZXMsIHByb3ZpZGVyIGFuZCBzZXJ2ZXIgZm9yIHRoZSB7eyBtb2RlbC5uYW1lIH19IHNlcnZpY2UuCnslIGlmIG1vZGVsLmRlc2NyaXB0aW9uICV9Cgp7eyBtb2RlbC5kZXNjcmlwdGlvbiB9fQp7JSBlbmRpZiAlfQoKIyMgT3BlcmF0aW9ucwoKeyUgZm9yIG1ldGhvZCBpbiBtb2RlbC5tZXRob2RzICV9Ci0gYHt7IG1ldGhvZC5tZXRob2QgfX0ge3sgbWV0aG9kLnBhdGggfX1gIC0+IGB7eyBtZXRob2QuY2xpZW50X25hbWUgfX0oKWB7eyAoIjogIiB+IG1ldGhvZC5kZXNjcmlwdGlvbikgaWYgbWV0aG9kLmRlc2NyaXB0aW9uIGVsc2UgIiIgfX0KeyUgZW5kZm9yICV9CnslIGlmIG1vZGVsLnR5cGVzICV9CgojIyBUeXBlcwoKeyUgZm9yIHNlcnZpY2VfdHlwZSBpbiBtb2RlbC50eXBlcyAlfQotIGB7eyBzZXJ2aWNlX3R5cGUubmFtZSB9fWAgKHt7IHNlcnZpY2VfdHlwZS5maWVsZHMgfCBsZW5ndGggfX0ge3sgImZpZWxkIiBpZiBzZXJ2aWNlX3R5cGUuZmllbGRzIHwgbGVuZ3RoID09IDEgZWxzZSAiZmllbGQiIHwgcGx1cmFsaXplIH19KQp7JSBlbmRmb3IgJX0KeyUgZW5kaWYgJX0K",
    "__init__.py": "IiIiR2VuZXJhdGVkIHBhY2thZ2UgZm9yIHRoZSB7eyBtb2RlbC5uYW1lIH19IHNlcnZpY2UuIiIiCiMtCmZyb20gLmNsaWVudCBpbXBvcnQgQ2xpZW50CmZyb20gLnByb3ZpZGVyIGltcG9ydCBQcm92aWRlcgpmcm9tIC5zZXJ2ZXIgaW1wb3J0IGNyZWF0ZV9hcHAKeyUgaWYgbW9kZWwudHlwZXMgJX0KZnJvbSAudHlwZXMgaW1wb3J0ICgKeyUgZm9yIHNlcnZpY2VfdHlwZSBpbiBtb2RlbC50eXBlcyAlfQogICAge3sgc2VydmljZV90eXBlLm5hbWUgfX0sCnslIGVuZGZvciAlfQopCnslIGVuZGlmICV9CiMtCl9fYWxsX18gPSBbCiAgICAiQ2xpZW50IiwKICAgICJQcm92aWRlciIsCiAgICAiY3JlYXRlX2FwcCIsCnslIGZvciBzZXJ2aWNlX3R5cGUgaW4gbW9kZWwudHlwZXMgJX0KICAgIHt7IHNlcnZpY2VfdHlwZS5uYW1lIHwgcXVvdGUgfX0sCnslIGVuZGZvciAlfQpdCg==",
}
