"""Built-in server and domain lists used when no list file is given."""

from dns_check.models.dns_server import Category, DNSServer, DomainEntry


# Source: DNSJumper
DEFAULT_DNS_SERVERS = (
    DNSServer("212.154.100.18", "TR - Türknet"),
    DNSServer("193.192.98.8", "TR - Türknet Secondary"),
    DNSServer("1.1.1.1", "AU - Cloudflare"),
    DNSServer("1.0.0.1", "AU - Cloudflare Secondary"),
    DNSServer("45.90.28.230", "US - NextDNS"),
    DNSServer("45.90.30.230", "US - NextDNS Secondary"),
    DNSServer("8.8.4.4", "US - Google Public DNS"),
    DNSServer("8.8.8.8", "US - Google Public DNS Secondary"),
    DNSServer("92.45.23.168", "TR - deik.org.tr"),
    DNSServer("195.244.44.45", "TR - CubeDNS - Netinternet"),
    DNSServer("195.244.44.44", "TR - CubeDNS - Netinternet Secondary"),
    DNSServer("9.9.9.9", "US - Quad9 Security"),
    DNSServer("149.112.112.112", "US - Quad9 Security Secondary"),
    DNSServer("149.112.112.10", "US - Quad9 No Security"),
    DNSServer("9.9.9.10", "US - Quad9 No Security Secondary"),
    DNSServer("156.154.71.1", "US - Neustar 1"),
    DNSServer("156.154.70.1", "US - Neustar 1 Secondary"),
    DNSServer("209.244.0.3", "US - Level 3 - A"),
    DNSServer("209.244.0.4", "US - Level 3 - A Secondary"),
    DNSServer("4.2.2.1", "US - Level 3 - B"),
    DNSServer("4.2.2.2", "US - Level 3 - B Secondary"),
    DNSServer("4.2.2.3", "US - Level 3 - C"),
    DNSServer("4.2.2.4", "US - Level 3 - C Secondary"),
    DNSServer("4.2.2.5", "US - Level 3 - D"),
    DNSServer("4.2.2.6", "US - Level 3 - D Secondary"),
    DNSServer("204.69.234.1", "US - UltraDNS"),
    DNSServer("204.74.101.1", "US - UltraDNS Secondary"),
    DNSServer("156.154.70.5", "US - Neustar 2"),
    DNSServer("156.154.71.5", "US - Neustar 2 Secondary"),
    DNSServer("199.85.126.10", "US - Norton ConnectSafe"),
    DNSServer("199.85.127.10", "US - Norton ConnectSafe Secondary"),
    DNSServer("198.153.192.1", "US - Norton DNS"),
    DNSServer("198.153.194.1", "US - Norton DNS Secondary"),
    DNSServer("64.6.65.6", "US - VeriSign Public DNS"),
    DNSServer("64.6.64.6", "US - VeriSign Public DNS Secondary"),
    DNSServer("156.154.71.22", "US - Comodo"),
    DNSServer("156.154.70.22", "US - Comodo Secondary"),
    DNSServer("208.67.220.220", "US - OpenDNS"),
    DNSServer("208.67.222.222", "US - OpenDNS Secondary"),
    DNSServer("208.67.222.220", "US - OpenDNS - 2"),
    DNSServer("195.46.39.39", "RU - Safe DNS"),
    DNSServer("195.46.39.40", "RU - Safe DNS Secondary"),
    DNSServer("176.9.1.117", "DE - DNSForge - Normal"),
    DNSServer("176.9.93.198", "DE - DNSForge - Normal Secondary"),
    DNSServer("49.12.223.2", "DE - DNSForge - Clean"),
    DNSServer("49.12.43.208", "DE - DNSForge - Clean Secondary"),
    DNSServer("195.92.195.94", "GB - Orange DNS"),
    DNSServer("195.92.195.95", "GB - Orange DNS Secondary"),
    DNSServer("49.12.222.213", "DE - DNSForge - Hard"),
    DNSServer("88.198.122.154", "DE - DNSForge - Hard Secondary"),
    DNSServer("138.199.149.249", "DE - DNSForge - Blank"),
    DNSServer("78.47.71.194", "DE - DNSForge - Blank Secondary"),
    DNSServer("163.172.141.219", "90dns - FR - US"),
    DNSServer("207.246.121.77", "90dns - FR - US Secondary"),
    DNSServer("185.228.169.9", "CleanBrowsing"),
    DNSServer("185.228.168.9", "CleanBrowsing Secondary"),
    DNSServer("8.26.56.26", "US - Comodo Secure"),
    DNSServer("8.20.247.20", "US - Comodo Secure Secondary"),
    DNSServer("8.20.247.10", "US - Comodo Secure Filtering"),
    DNSServer("8.26.56.10", "US - Comodo Secure Filtering Secondary"),
    DNSServer("212.23.8.1", "GB - Zen Internet"),
    DNSServer("212.23.3.1", "GB - Zen Internet Secondary"),
    DNSServer("94.140.15.15", "RU - AdGuard DNS"),
    DNSServer("94.140.14.14", "RU - AdGuard DNS Secondary"),
    DNSServer("74.82.42.42", "US - Hurricane Electric"),
    DNSServer("77.88.8.1", "RU - Yandex"),
    DNSServer("77.88.8.8", "RU - Yandex Secondary"),
    DNSServer("205.171.2.65", "US - Qwest"),
    DNSServer("205.171.3.65", "US - Qwest Secondary"),
    DNSServer("80.80.80.80", "NL - Freenom World"),
    DNSServer("80.80.81.81", "NL - Freenom World Secondary"),
    DNSServer("216.146.36.36", "US - Dyn"),
    DNSServer("216.146.35.35", "US - Dyn Secondary"),
    DNSServer("95.216.149.205", "LavaDNS - dns.lavate.ch"),
    DNSServer("46.20.159.27", "TR - Dora Telekom"),
    DNSServer("46.20.159.27", "TR - Dora Telekom Secondary"),
    DNSServer("76.76.19.19", "Alternate DNS"),
    DNSServer("76.223.122.150", "Alternate DNS Secondary"),
    DNSServer("89.233.43.71", "DK - Censurfridns"),
    DNSServer("91.239.100.100", "DK - Censurfridns Secondary"),
    DNSServer("80.67.169.12", "FR - FDN"),
    DNSServer("80.67.169.40", "FR - FDN Secondary"),
    DNSServer("199.2.252.10", "US - Sprintlink"),
    DNSServer("204.97.212.10", "US - Sprintlink Secondary"),
    DNSServer("84.200.69.80", "DE - DNS WATCH"),
    DNSServer("84.200.70.40", "DE - DNS WATCH Secondary"),
    DNSServer("204.97.212.10", "US - Sprint"),
    DNSServer("204.117.214.10", "US - Sprint Secondary"),
)

DEFAULT_DOMAINS = (
    # General websites
    DomainEntry("google.com", Category.GENERAL),
    DomainEntry("youtube.com", Category.GENERAL),
    DomainEntry("facebook.com", Category.GENERAL),
    DomainEntry("instagram.com", Category.GENERAL),
    DomainEntry("twitter.com", Category.GENERAL),
    DomainEntry("x.com", Category.GENERAL),
    DomainEntry("discord.com", Category.GENERAL),
    DomainEntry("github.com", Category.GENERAL),
    DomainEntry("stackoverflow.com", Category.GENERAL),
    DomainEntry("reddit.com", Category.GENERAL),
    DomainEntry("netflix.com", Category.GENERAL),
    DomainEntry("amazon.com", Category.GENERAL),
    DomainEntry("microsoft.com", Category.GENERAL),
    DomainEntry("apple.com", Category.GENERAL),
    DomainEntry("cloudflare.com", Category.GENERAL),
    DomainEntry("wikipedia.org", Category.GENERAL),
    DomainEntry("yandex.com", Category.GENERAL),
    DomainEntry("baidu.com", Category.GENERAL),
    # Other services
    DomainEntry("pastebin.com", Category.OTHER),
    DomainEntry("roblox.com", Category.OTHER),
    # Adult content
    DomainEntry("pornhub.com", Category.ADULT),
    DomainEntry("xvideos.com", Category.ADULT),
    # Advertisement and tracking servers
    DomainEntry("googleadservices.com", Category.AD_SERVER),
    DomainEntry("googlesyndication.com", Category.AD_SERVER),
    DomainEntry("googletagmanager.com", Category.AD_SERVER),
    DomainEntry("doubleclick.net", Category.AD_SERVER),
    DomainEntry("google-analytics.com", Category.AD_SERVER),
    DomainEntry("adsystem.amazon.com", Category.AD_SERVER),
    DomainEntry("amazon-adsystem.com", Category.AD_SERVER),
    DomainEntry("connect.facebook.net", Category.AD_SERVER),
    DomainEntry("ads.linkedin.com", Category.AD_SERVER),
    DomainEntry("analytics.twitter.com", Category.AD_SERVER),
    DomainEntry("ads.twitter.com", Category.AD_SERVER),
    DomainEntry("ads.yahoo.com", Category.AD_SERVER),
    DomainEntry("advertising.com", Category.AD_SERVER),
    DomainEntry("adsystem.microsoft.com", Category.AD_SERVER),
    DomainEntry("bat.bing.com", Category.AD_SERVER),
)
