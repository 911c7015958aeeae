"""
Job Board UI backend - Flask app serving the listing and creation flows.

Forwards filters and new postings to the REST API, checks the creation
form before it is sent, and keeps an unsubmitted form as a session draft.
"""
