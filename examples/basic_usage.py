"""
Example: Basic QuickBase usage with quickbase
=============================================

This example shows how to authenticate and run API calls.
"""

from quickbase import (
    ConnectionContext,
    QuickBaseAPICall,
    QuickBaseConfig,
    QuickBaseCredentials,
    QuickBaseSession,
    QuickBaseUpstreamError,
)


def example_basic_query():
    """Basic query against a known database id."""

    cfg = QuickBaseConfig(
        domain="example.quickbase.com",
        credentials=QuickBaseCredentials("USER@example.com", "PASSWORD"),
        auth_hours=4,
    )

    with QuickBaseSession(cfg) as sess:
        doc = sess.execute(
            "bdcagynhs",
            QuickBaseAPICall.API_DoQuery,
            [("query", "{'3'.GT.'0'}"), ("fmt", "structured")],
        )
        for record in doc.iter("record"):
            print(record.attrib.get("rid"))

        sess.sign_off()


def example_connection_context():
    """Using ConnectionContext with environment variables."""

    # Reads QB_DOMAIN, QB_USER, QB_PASS, QB_AUTH_HOURS
    with ConnectionContext() as conn:
        db = conn.find_database("Projects")
        try:
            db.execute_xml(
                QuickBaseAPICall.API_AddRecord,
                '<field fid="6">New project</field>',
            )
        except QuickBaseUpstreamError as e:
            print(f"QuickBase rejected the record: {e.error_code} {e.error_text}")


if __name__ == "__main__":
    # Uncomment the example you want to run
    # example_basic_query()
    # example_connection_context()

    print("Set up your environment variables and uncomment an example to run.")
    print("Required: QB_DOMAIN, QB_USER, QB_PASS, QB_AUTH_HOURS")
