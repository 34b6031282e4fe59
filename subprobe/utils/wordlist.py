"""Candidate wordlist loading for SUBPROBE."""

import logging
from typing import Iterable, Optional, Tuple

from subprobe.core.exceptions import WordlistError

logger = logging.getLogger('subprobe.wordlist')

# Built-in candidates used when no wordlist file is given
DEFAULT_WORDLIST = (
    'www', 'mail', 'ftp', 'localhost', 'webmail', 'smtp', 'pop', 'pop3', 'imap',
    'ns', 'ns1', 'ns2', 'ns3', 'ns4', 'dns', 'dns1', 'dns2', 'mx', 'mx1', 'mx2',
    'webdisk', 'autodiscover', 'autoconfig', 'cpanel', 'whm', 'webhost', 'host',
    'admin', 'administrator', 'blog', 'dashboard', 'api', 'api1', 'api2', 'apis',
    'dev', 'development', 'staging', 'stage', 'test', 'testing', 'qa', 'uat',
    'beta', 'alpha', 'demo', 'sandbox', 'prod', 'production', 'preprod', 'pre',
    'secure', 'server', 'portal', 'intranet', 'extranet', 'vpn', 'remote',
    'ssh', 'sftp', 'email', 'exchange', 'owa', 'lyncdiscover', 'sip',
    'database', 'db', 'mysql', 'sql', 'redis', 'elastic', 'search',
    'proxy', 'cdn', 'static', 'assets', 'media', 'img', 'images', 'files',
    'download', 'downloads', 'upload', 'uploads', 'docs', 'wiki', 'help',
    'support', 'status', 'stats', 'metrics', 'monitor', 'monitoring', 'grafana',
    'kibana', 'prometheus', 'logs', 'log', 'backup', 'backups', 'archive',
    'git', 'gitlab', 'github', 'svn', 'jenkins', 'ci', 'build', 'jira',
    'confluence', 'bitbucket', 'registry', 'docker', 'k8s', 'kubernetes',
    'internal', 'external', 'corp', 'corporate', 'office', 'partners',
    'partner', 'customers', 'clients', 'client', 'cloud', 'aws', 'azure',
    'auth', 'login', 'sso', 'id', 'identity', 'accounts', 'account', 'oauth',
    'ldap', 'ad', 'signup', 'register', 'my', 'user', 'users', 'members',
    'shop', 'store', 'cart', 'checkout', 'pay', 'payment', 'payments',
    'billing', 'invoice', 'orders', 'forum', 'forums', 'community', 'news',
    'events', 'calendar', 'chat', 'meet', 'video', 'live', 'stream', 'tv',
    'm', 'mobile', 'app', 'apps', 'web', 'www1', 'www2', 'www3', 'old', 'new',
    'v1', 'v2', 'legacy', 'gateway', 'gw', 'router', 'firewall', 'fw',
    'mail1', 'mail2', 'smtp1', 'smtp2', 'relay', 'mta', 'imap1', 'pop1',
    'crm', 'erp', 'hr', 'finance', 'sales', 'marketing', 'analytics',
    'tracking', 'ads', 'go', 'link', 'links', 'cms', 'wordpress', 'wp',
    'public', 'private', 'lab', 'labs', 'research', 'edu', 'learn', 'training',
    'jobs', 'careers', 'info', 'about', 'home', 'service', 'services',
)


def parse_wordlist(lines: Iterable[str]) -> Tuple[str, ...]:
    """Extract candidate labels from raw wordlist lines.

    Lines are stripped; blank lines and lines starting with ``#`` are dropped.
    Order and duplicates are preserved.
    """
    words = []
    for line in lines:
        word = line.strip()
        if not word or word.startswith('#'):
            continue
        words.append(word)
    return tuple(words)


def load_wordlist(path: Optional[str] = None) -> Tuple[str, ...]:
    """Load candidate labels.

    Args:
        path: Wordlist file, or None for the built-in list

    Returns:
        Immutable sequence of candidate labels

    Raises:
        WordlistError: If the file cannot be read
    """
    if not path:
        logger.debug(f"Using built-in wordlist ({len(DEFAULT_WORDLIST)} entries)")
        return DEFAULT_WORDLIST

    try:
        with open(path, 'r', encoding='utf-8', errors='ignore') as f:
            words = parse_wordlist(f)
    except OSError as e:
        raise WordlistError(f"Cannot read wordlist {path}: {e.strerror or e}") from e

    logger.debug(f"Loaded {len(words)} entries from {path}")
    return words
