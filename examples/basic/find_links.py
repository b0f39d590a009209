"""Find bare autolinks in a line of text — zero config, zero deps."""

from barelinks import AutolinkToken, scan_autolinks

text = "Ask ~alice or mail a.b@example.com, see www.example.com/faq and /r/python."

for token in scan_autolinks(text):
    if isinstance(token, AutolinkToken):
        print(f"{token.match.kind.name:<10} {token.match.href}")
    else:
        print(f"{'text':<10} {token.content!r}")
