summary_template = """Write a concise summary of the following:


"{text}"


CONCISE SUMMARY:"""

combine_template = """Write a concise summary of the following partial summaries:


"{text}"


CONCISE SUMMARY:"""
