"""core subpackage: the Bucket carrier, its identifiers and combinators."""
