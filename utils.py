import hashlib
import re
import uuid

_IPV4_MAPPED_PREFIX = re.compile(r'^::ffff:')


def hash_ip(ip):
    """One-way SHA-256 hash of an IP address, or None when there is no address."""
    if not ip:
        return None
    clean_ip = _IPV4_MAPPED_PREFIX.sub('', ip)
    return hashlib.sha256(clean_ip.encode('utf-8')).hexdigest()


def get_ip_address(request):
    """Client IP from proxy headers, falling back to the socket address."""
    forwarded = request.headers.get('X-Forwarded-For')
    if forwarded:
        # may hold a chain of proxies; the client is first
        return forwarded.split(',')[0].strip()

    real_ip = request.headers.get('X-Real-IP')
    if real_ip:
        return real_ip.strip()

    cf_connecting_ip = request.headers.get('CF-Connecting-IP')
    if cf_connecting_ip:
        return cf_connecting_ip.strip()

    return request.remote_addr


def is_valid_uuid(value):
    try:
        uuid.UUID(str(value))
    except ValueError:
        return False
    return True
