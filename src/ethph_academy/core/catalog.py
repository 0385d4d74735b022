"""Static site content: tutorials, sidebar, projects, resources, templates.

Everything here is authored data. Tutorial bodies live in
``content/tutorials/<slug>.md``; this module only holds their metadata.
"""

from dataclasses import dataclass

from ethph_academy.core.navigation import NavigationItem, NavigationSection
from ethph_academy.core.types import Difficulty, URLPath


@dataclass(frozen=True)
class Tutorial:
    """Tutorial page metadata."""

    slug: str
    title: str
    section: str
    difficulty: Difficulty
    reading_time: str
    summary: str

    @property
    def path(self) -> URLPath:
        return URLPath(f"/tutorials/{self.slug}")


@dataclass(frozen=True)
class FeaturedTutorial:
    """Tutorial card on the home page."""

    title: str
    description: str
    icon: str
    difficulty: Difficulty
    duration: str
    path: URLPath


@dataclass(frozen=True)
class Project:
    """Community project card."""

    title: str
    description: str
    difficulty: Difficulty
    categories: tuple[str, ...]
    image: str
    path: URLPath
    creator: str | None = None
    github_link: str | None = None


@dataclass(frozen=True)
class Resource:
    """External learning resource."""

    title: str
    description: str
    url: str
    icon: str
    category: str


@dataclass(frozen=True)
class Template:
    """Playground source template."""

    id: str
    name: str
    description: str
    code: str


def _tutorial(
    slug: str,
    title: str,
    section: str,
    difficulty: Difficulty,
    reading_time: str,
    summary: str,
) -> Tutorial:
    return Tutorial(slug, title, section, difficulty, reading_time, summary)


TUTORIALS: tuple[Tutorial, ...] = (
    _tutorial(
        "introduction",
        "Introduction to Solidity",
        "Getting Started",
        "Beginner",
        "~20 min",
        "What Solidity is, what smart contracts are, and a first contract.",
    ),
    _tutorial(
        "setup",
        "Setting Up Your Development Environment",
        "Getting Started",
        "Beginner",
        "~15 min",
        "Online IDEs, a local toolchain and editor configuration.",
    ),
    _tutorial(
        "github-basics",
        "GitHub Basics & Project Setup",
        "Getting Started",
        "Beginner",
        "~35 min",
        "Git installation, SSH keys and a collaboration workflow.",
    ),
    _tutorial(
        "foundry",
        "Foundry: Modern Smart Contract Development",
        "Getting Started",
        "Intermediate",
        "~25 min",
        "Install Foundry, write and run tests, deploy with forge, cast and anvil.",
    ),
    _tutorial(
        "foundry-scripts",
        "Common Foundry Scripts",
        "Getting Started",
        "Intermediate",
        "~20 min",
        "Everyday forge, cast and anvil commands collected in one place.",
    ),
    _tutorial(
        "basic-syntax",
        "Basic Syntax in Solidity",
        "Solidity Basics",
        "Beginner",
        "~30 min",
        "Contract layout, comments, data locations, visibility and events.",
    ),
    _tutorial(
        "data-types",
        "Data Types in Solidity",
        "Solidity Basics",
        "Beginner",
        "~25 min",
        "Value types, reference types and special types.",
    ),
    _tutorial(
        "functions",
        "Functions in Solidity",
        "Solidity Basics",
        "Intermediate",
        "~35 min",
        "Declaring, overloading and calling functions; modifiers and selectors.",
    ),
    _tutorial(
        "contract-linking",
        "Linking Smart Contracts Together",
        "Solidity Basics",
        "Intermediate",
        "~25 min",
        "Interfaces, direct calls, low-level calls, libraries and factories.",
    ),
    _tutorial(
        "inheritance",
        "Inheritance & Interfaces",
        "Solidity Basics",
        "Intermediate",
        "~25 min",
        "Single and multiple inheritance, abstract contracts and interfaces.",
    ),
    _tutorial(
        "erc20",
        "ERC20 Token Standard",
        "Smart Contracts",
        "Intermediate",
        "~30 min",
        "The fungible token interface, a basic implementation and OpenZeppelin.",
    ),
    _tutorial(
        "erc721",
        "ERC721 NFT Standard",
        "Smart Contracts",
        "Intermediate",
        "~30 min",
        "Non-fungible tokens, metadata and deploying a collection.",
    ),
    _tutorial(
        "erc1155",
        "ERC1155 Multi-Token Standard",
        "Smart Contracts",
        "Advanced",
        "~35 min",
        "Fungible and non-fungible tokens in a single contract.",
    ),
    _tutorial(
        "security-best-practices",
        "Security Best Practices",
        "Security",
        "Advanced",
        "~30 min",
        "Key management, contract hardening and a secure development process.",
    ),
    _tutorial(
        "common-attacks",
        "Common Smart Contract Attacks",
        "Security",
        "Advanced",
        "~35 min",
        "Reentrancy, overflow, front-running, access control, DoS and oracles.",
    ),
    _tutorial(
        "devops-security",
        "DevOps Security Best Practices",
        "Security",
        "Advanced",
        "~25 min",
        "Secrets hygiene, testing, deployment, monitoring and incident response.",
    ),
    _tutorial(
        "chainlink-vrf",
        "Chainlink VRF: Verifiable Random Numbers",
        "Advanced Topics",
        "Advanced",
        "~30 min",
        "Requesting provably fair randomness on chain.",
    ),
    _tutorial(
        "oracle-integration",
        "Oracle Integration: Using External Data",
        "Advanced Topics",
        "Advanced",
        "~30 min",
        "Price feeds, custom oracles and aggregating data sources.",
    ),
    _tutorial(
        "gas-optimization",
        "Gas Optimization Techniques",
        "Advanced Topics",
        "Advanced",
        "~25 min",
        "Storage packing, cheaper computation, loops, functions and events.",
    ),
    _tutorial(
        "design-patterns",
        "Smart Contract Design Patterns",
        "Advanced Topics",
        "Advanced",
        "~30 min",
        "Factory, proxy, guard check, state machine, withdrawal and more.",
    ),
    _tutorial(
        "wagmi-integration",
        "WAGMI Integration with Foundry",
        "Advanced Topics",
        "Advanced",
        "~25 min",
        "Connecting a React front end to Foundry-deployed contracts.",
    ),
    _tutorial(
        "transaction-status",
        "Showing Transaction Status",
        "WAGMI",
        "Intermediate",
        "~20 min",
        "Pending, confirmed and failed states for submitted transactions.",
    ),
    _tutorial(
        "wallet-actions",
        "Wallet Actions & Network Management",
        "WAGMI",
        "Intermediate",
        "~20 min",
        "Connecting wallets, switching networks, balances, ENS and signing.",
    ),
    _tutorial(
        "contract-interactions",
        "Smart Contract Interactions",
        "WAGMI",
        "Intermediate",
        "~25 min",
        "Reading, writing and watching events from the front end.",
    ),
    _tutorial(
        "nft-minter",
        "Building an NFT Minter",
        "WAGMI",
        "Intermediate",
        "~25 min",
        "A mint page backed by an ERC721 contract with a supply cap.",
    ),
    _tutorial(
        "marketplace",
        "Building a Web3 Marketplace",
        "WAGMI Integration",
        "Advanced",
        "~45 min",
        "Listing, buying and tracking products end to end.",
    ),
    _tutorial(
        "usdc-payment",
        "Building a USDC Payment Widget",
        "WAGMI",
        "Intermediate",
        "~25 min",
        "Approving and sending USDC through a payment contract.",
    ),
)

TUTORIALS_BY_SLUG: dict[str, Tutorial] = {tutorial.slug: tutorial for tutorial in TUTORIALS}


def _item(title: str, slug: str) -> NavigationItem:
    return NavigationItem(title=title, path=URLPath(f"/tutorials/{slug}"))


DEFAULT_NAVIGATION: tuple[NavigationSection, ...] = (
    NavigationSection(
        title="Getting Started",
        icon="book-open",
        expanded=True,
        items=(
            _item("Introduction to Solidity", "introduction"),
            _item("Development Environment", "setup"),
            _item("GitHub Basics", "github-basics"),
        ),
    ),
    NavigationSection(
        title="Solidity Basics",
        icon="code",
        items=(
            _item("Basic Syntax", "basic-syntax"),
            _item("Data Types", "data-types"),
            _item("Functions", "functions"),
            _item("Contract Linking", "contract-linking"),
            _item("Inheritance & Interfaces", "inheritance"),
        ),
    ),
    NavigationSection(
        title="Smart Contracts",
        icon="cpu",
        items=(
            _item("ERC20 Tokens", "erc20"),
            _item("ERC721 NFTs", "erc721"),
            _item("ERC1155 Multi-Token", "erc1155"),
        ),
    ),
    NavigationSection(
        title="Foundry",
        icon="wrench",
        items=(
            _item("Getting Started with Foundry", "foundry"),
            _item("Common Scripts & Commands", "foundry-scripts"),
        ),
    ),
    NavigationSection(
        title="Security",
        icon="shield",
        items=(
            _item("Best Practices", "security-best-practices"),
            _item("Common Attacks", "common-attacks"),
            _item("DevOps Security", "devops-security"),
        ),
    ),
    NavigationSection(
        title="Advanced Topics",
        icon="zap",
        items=(
            _item("Chainlink VRF", "chainlink-vrf"),
            _item("Oracle Integration", "oracle-integration"),
            _item("Gas Optimization", "gas-optimization"),
            _item("Design Patterns", "design-patterns"),
        ),
    ),
    NavigationSection(
        title="WAGMI",
        icon="wallet",
        items=(
            _item("WAGMI Integration", "wagmi-integration"),
            _item("Transaction Status", "transaction-status"),
            _item("Wallet Actions", "wallet-actions"),
            _item("Contract Interactions", "contract-interactions"),
            _item("NFT Minter", "nft-minter"),
            _item("Marketplace", "marketplace"),
            _item("USDC Payment Widget", "usdc-payment"),
        ),
    ),
)

FEATURED_TUTORIALS: tuple[FeaturedTutorial, ...] = (
    FeaturedTutorial(
        title="Introduction to Solidity",
        description="Learn about Solidity and its role in Ethereum smart contract development",
        icon="book-open",
        difficulty="Beginner",
        duration="20 min",
        path=URLPath("/tutorials/introduction"),
    ),
    FeaturedTutorial(
        title="Setting Up Your Environment",
        description="Configure your development environment for Solidity programming",
        icon="settings",
        difficulty="Beginner",
        duration="15 min",
        path=URLPath("/tutorials/setup"),
    ),
    FeaturedTutorial(
        title="Solidity Basics",
        description="Learn the fundamental syntax and structure of Solidity code",
        icon="code",
        difficulty="Beginner",
        duration="30 min",
        path=URLPath("/tutorials/basic-syntax"),
    ),
    FeaturedTutorial(
        title="Data Types in Solidity",
        description="Explore the various data types available in Solidity",
        icon="cpu",
        difficulty="Beginner",
        duration="25 min",
        path=URLPath("/tutorials/data-types"),
    ),
    FeaturedTutorial(
        title="Functions & Modifiers",
        description="Learn how to create and use functions and modifiers in Solidity",
        icon="zap",
        difficulty="Intermediate",
        duration="35 min",
        path=URLPath("/tutorials/functions"),
    ),
    FeaturedTutorial(
        title="Smart Contract Design Patterns",
        description="Understand common vulnerabilities and how to secure your contracts",
        icon="shield",
        difficulty="Advanced",
        duration="45 min",
        path=URLPath("/tutorials/design-patterns"),
    ),
)

_PEXELS = "https://images.pexels.com/photos/{0}/pexels-photo-{0}.jpeg?auto=compress&cs=tinysrgb&w=1260&h=750&dpr=2"

PROJECTS: tuple[Project, ...] = (
    Project(
        title="Simple Storage Contract",
        description="Build a basic contract that stores and retrieves values on the blockchain",
        difficulty="Beginner",
        categories=("Storage", "Basic"),
        image=_PEXELS.format(8370752),
        path=URLPath("/projects/simple-storage"),
        creator="John Smith",
    ),
    Project(
        title="Token Creation",
        description="Create your own ERC-20 token with transferable balances",
        difficulty="Beginner",
        categories=("ERC-20", "Tokens"),
        image=_PEXELS.format(844124),
        path=URLPath("/projects/token-creation"),
        creator="Alice Johnson",
        github_link="https://github.com/OpenZeppelin/openzeppelin-contracts/blob/master/contracts/token/ERC20/ERC20.sol",
    ),
    Project(
        title="Voting System",
        description="Build a decentralized voting system with proposal and vote tracking",
        difficulty="Intermediate",
        categories=("Governance", "Voting"),
        image=_PEXELS.format(1550337),
        path=URLPath("/projects/voting-system"),
        creator="Bob Wilson",
    ),
    Project(
        title="NFT Collection",
        description="Create a non-fungible token collection with unique digital assets",
        difficulty="Intermediate",
        categories=("ERC-721", "NFT"),
        image=_PEXELS.format(2047905),
        path=URLPath("/projects/nft-collection"),
        creator="Carol Martinez",
        github_link="https://github.com/OpenZeppelin/openzeppelin-contracts/blob/master/contracts/token/ERC721/ERC721.sol",
    ),
    Project(
        title="Decentralized Marketplace",
        description="Build a peer-to-peer marketplace for digital and physical goods",
        difficulty="Advanced",
        categories=("DApp", "Marketplace"),
        image=_PEXELS.format(3943901),
        path=URLPath("/projects/marketplace"),
        creator="David Brown",
    ),
    Project(
        title="DeFi Yield Farm",
        description="Create a yield farming contract with staking and rewards",
        difficulty="Advanced",
        categories=("DeFi", "Staking"),
        image=_PEXELS.format(2132281),
        path=URLPath("/projects/yield-farm"),
        creator="Eva Chen",
    ),
)

RESOURCE_CATEGORIES: dict[str, str] = {
    "documentation": "Documentation",
    "tutorial": "Tutorials",
    "tool": "Tools",
    "community": "Community",
    "security": "Security",
    "book": "Books & Publications",
}

RESOURCES: tuple[Resource, ...] = (
    Resource("Solidity Documentation", "Official documentation for the Solidity programming language", "https://docs.soliditylang.org/", "book", "documentation"),
    Resource("Foundry Documentation", "Official documentation for the Foundry development toolkit", "https://book.getfoundry.sh/", "book", "documentation"),
    Resource("WAGMI Documentation", "Collection of React Hooks for Ethereum development", "https://wagmi.sh/", "book", "documentation"),
    Resource("Solidity by Example", "Learn Solidity with simple, practical examples", "https://solidity-by-example.org/", "code", "tutorial"),
    Resource("Alchemy University", "Learn blockchain development with interactive courses", "https://university.alchemy.com/", "book", "tutorial"),
    Resource("Cyfrin Updraft", "Advanced smart contract security and development courses", "https://updraft.cyfrin.io/", "book", "tutorial"),
    Resource("SpeedRunEthereum", "Learn Ethereum development through hands-on challenges", "https://speedrunethereum.com/", "code", "tutorial"),
    Resource("Chainlink", "Decentralized oracle network for smart contracts", "https://chain.link/", "globe", "tool"),
    Resource("QuickNode", "Blockchain infrastructure and node provider", "https://www.quicknode.com/", "globe", "tool"),
    Resource("Infura", "Web3 development platform and infrastructure", "https://www.infura.io/", "globe", "tool"),
    Resource("RainbowKit", "The best way to connect a wallet", "https://www.rainbowkit.com/", "code", "tool"),
    Resource("Sepolia Faucet", "Get testnet ETH for development", "https://sepolia-faucet.pk910.de/", "globe", "tool"),
    Resource("Ethereum Stack Exchange", "Q&A platform for Ethereum developers", "https://ethereum.stackexchange.com/", "globe", "community"),
    Resource("ETH PH", "Philippine Ethereum Community", "https://eth63.org", "globe", "community"),
    Resource("Ethernaut", "Learn Ethereum security through gamified challenges", "https://ethernaut.openzeppelin.com/", "shield", "security"),
    Resource("Damn Vulnerable DeFi", "Learn DeFi security through challenges", "https://www.damnvulnerabledefi.xyz/", "shield", "security"),
    Resource("ETH Tech Tree", "Comprehensive guide to Ethereum development resources", "https://www.ethtechtree.com/", "shield", "security"),
    Resource("BuidlGuidl CTF", "Capture The Flag challenges for Ethereum developers", "https://ctf.buidlguidl.com/", "shield", "security"),
    Resource("Mastering Ethereum", "Comprehensive book by Andreas M. Antonopoulos and Gavin Wood", "https://github.com/ethereumbook/ethereumbook", "file-text", "book"),
)


def resources_by_category() -> list[tuple[str, list[Resource]]]:
    """Group resources under their category labels in display order."""
    return [
        (label, [resource for resource in RESOURCES if resource.category == category])
        for category, label in RESOURCE_CATEGORIES.items()
    ]


PLAYGROUND_TEMPLATES: tuple[Template, ...] = (
    Template(
        id="hello-world",
        name="Hello World",
        description="A simple contract that stores and retrieves a greeting message",
        code="""// SPDX-License-Identifier: MIT
pragma solidity ^0.8.0;

contract HelloWorld {
    string private greeting;

    constructor() {
        greeting = "Hello, World!";
    }

    function getGreeting() public view returns (string memory) {
        return greeting;
    }

    function setGreeting(string memory _greeting) public {
        greeting = _greeting;
    }
}""",
    ),
    Template(
        id="erc20",
        name="ERC20 Token",
        description="A basic ERC-20 token implementation",
        code="""// SPDX-License-Identifier: MIT
pragma solidity ^0.8.0;

import "@openzeppelin/contracts/token/ERC20/ERC20.sol";
import "@openzeppelin/contracts/access/Ownable.sol";

contract MyToken is ERC20, Ownable {
    constructor() ERC20("MyToken", "MTK") {
        _mint(msg.sender, 1000000 * 10 ** decimals());
    }

    function mint(address to, uint256 amount) public onlyOwner {
        _mint(to, amount);
    }
}""",
    ),
    Template(
        id="nft",
        name="NFT Collection",
        description="A simple NFT collection with minting functionality",
        code="""// SPDX-License-Identifier: MIT
pragma solidity ^0.8.0;

import "@openzeppelin/contracts/token/ERC721/ERC721.sol";
import "@openzeppelin/contracts/access/Ownable.sol";
import "@openzeppelin/contracts/utils/Counters.sol";

contract MyNFT is ERC721, Ownable {
    using Counters for Counters.Counter;
    Counters.Counter private _tokenIds;

    constructor() ERC721("MyNFT", "MNFT") {}

    function mint(address to) public onlyOwner returns (uint256) {
        _tokenIds.increment();
        uint256 newTokenId = _tokenIds.current();
        _mint(to, newTokenId);
        return newTokenId;
    }
}""",
    ),
    Template(
        id="dao",
        name="Simple DAO",
        description="A basic DAO implementation with proposal and voting functionality",
        code="""// SPDX-License-Identifier: MIT
pragma solidity ^0.8.0;

contract SimpleDAO {
    struct Proposal {
        string description;
        uint256 voteCount;
        bool executed;
        mapping(address => bool) hasVoted;
    }

    mapping(uint256 => Proposal) public proposals;
    uint256 public proposalCount;
    mapping(address => bool) public members;

    constructor() {
        members[msg.sender] = true;
    }

    function addMember(address member) public {
        require(members[msg.sender], "Not a member");
        members[member] = true;
    }

    function createProposal(string memory description) public {
        require(members[msg.sender], "Not a member");
        proposalCount++;
        Proposal storage proposal = proposals[proposalCount];
        proposal.description = description;
    }

    function vote(uint256 proposalId) public {
        require(members[msg.sender], "Not a member");
        Proposal storage proposal = proposals[proposalId];
        require(!proposal.hasVoted[msg.sender], "Already voted");
        require(!proposal.executed, "Proposal already executed");

        proposal.hasVoted[msg.sender] = true;
        proposal.voteCount++;
    }
}""",
    ),
)
