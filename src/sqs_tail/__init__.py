"""
sqs_tail - listen to an SQS queue and pretty-print its messages.

Resolves a queue by name prefix, long-polls it, unwraps SNS envelopes,
optionally truncates long fields and prints each body to the terminal.
"""

__version__ = "0.1.0"
