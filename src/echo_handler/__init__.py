"""Lambda function that echoes its event and invocation context back to the caller."""
