"""Shared pytest fixtures for taxonomy_index tests."""

import logging
from xml.dom import minidom

import pytest

from taxonomy_index.tree.elements import DomElement, Element
from taxonomy_index.tree.index import TaxonomyTree
from taxonomy_index.tree.taxon import Taxon

# Configure debug logging for tests
logging.basicConfig(
    level=logging.DEBUG,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

PRIMATES_XML = """<?xml version="1.0"?>
<order name="Primates">
  <semiorder name="Haplorrhini">
    <suborder name="Simiiformes">
      <infraorder name="Catarrhini">
        <superfamily name="Hominoidea">
          <family name="Hominidae">
            <genus name="Homo">
              <species name="Sapiens"/>
            </genus>
            <genus name="Pan">
              <species name="Troglodytes"/>
              <species name="Paniscus"/>
            </genus>
          </family>
          <family name="Hylobatidae">
            <genus name="Hylobates">
              <species name="Lar"/>
            </genus>
          </family>
        </superfamily>
        <superfamily name="Cercopithecoidea">
          <family name="Cercopithecidae">
            <genus name="Macaca">
              <species name="Mulatta"/>
            </genus>
          </family>
        </superfamily>
      </infraorder>
      <infraorder name="Platyrrhini">
        <superfamily name="Ateloidea">
          <family name="Atelidae"/>
        </superfamily>
      </infraorder>
    </suborder>
    <suborder name="Tarsiiformes"/>
  </semiorder>
  <semiorder name="Strepsirrhini">
    <suborder name="Lemuriformes"/>
  </semiorder>
</order>
"""

# Expected taxa per rank in PRIMATES_XML
PRIMATES_BY_RANK = {
    "ORDER": {"Primates"},
    "SEMIORDER": {"Haplorrhini", "Strepsirrhini"},
    "SUBORDER": {"Simiiformes", "Tarsiiformes", "Lemuriformes"},
    "INFRAORDER": {"Catarrhini", "Platyrrhini"},
    "SUPERFAMILY": {"Hominoidea", "Cercopithecoidea", "Ateloidea"},
    "FAMILY": {"Hominidae", "Hylobatidae", "Cercopithecidae", "Atelidae"},
    "GENUS": {"Homo", "Pan", "Hylobates", "Macaca"},
    "SPECIES": {"Sapiens", "Troglodytes", "Paniscus", "Lar", "Mulatta"},
}


@pytest.fixture
def primates_xml():
    """Indented primate taxonomy markup."""
    return PRIMATES_XML


@pytest.fixture
def primates_dom(primates_xml):
    """Primate taxonomy as a wrapped minidom document."""
    return DomElement.wrap(minidom.parseString(primates_xml))


@pytest.fixture
def primates_tree(primates_dom):
    """Indexed primate taxonomy."""
    return TaxonomyTree.from_element(primates_dom)


@pytest.fixture
def haplorrhini_element():
    """Two-level tree: Primates with a single semiorder branch."""
    return Element.node(
        "order",
        "Primates",
        children=[Element.text(), Element.node("semiorder", "Haplorrhini"), Element.text()],
    )


@pytest.fixture
def haplorrhini_tree(haplorrhini_element):
    return TaxonomyTree.from_element(haplorrhini_element)


@pytest.fixture
def hominidae_element():
    """Family rooted tree using hand-built elements."""
    return Element.node(
        "Family",
        "Hominidae",
        children=[
            Element.node("genus", "Homo", children=[Element.node("species", "Sapiens")]),
            Element.node(
                "genus",
                "Pan",
                children=[
                    Element.node("species", "Troglodytes"),
                    Element.node("species", "Paniscus"),
                ],
            ),
        ],
    )


@pytest.fixture
def hominidae_taxon(hominidae_element):
    return Taxon.from_element(hominidae_element)
