"""Integration tests for end-to-end workflows."""

import logging
from xml.dom import minidom
from xml.etree import ElementTree

import pytest

from conftest import PRIMATES_BY_RANK
from taxonomy_index import (
    BuildOptions,
    DomElement,
    EtreeElement,
    TaxonomyTree,
    TaxonRank,
    UnknownRankError,
    get_logger,
    setup_logging,
)


@pytest.mark.integration
class TestMarkupWorkflow:
    """Test parsed markup → taxonomy → queries."""

    def test_dom_and_etree_agree(self, primates_xml):
        dom_tree = TaxonomyTree.from_element(DomElement.wrap(minidom.parseString(primates_xml)))
        etree_tree = TaxonomyTree.from_element(
            EtreeElement.wrap(ElementTree.fromstring(primates_xml.split("?>", 1)[1]))
        )

        assert dom_tree.to_frame().equals(etree_tree.to_frame())
        for rank in TaxonRank:
            assert [t.name for t in dom_tree.get_taxa_of_rank(rank)] == [
                t.name for t in etree_tree.get_taxa_of_rank(rank)
            ]

    def test_lookup_then_classify(self, primates_tree):
        sapiens = primates_tree.get_taxon("sapiens")
        assert sapiens.full_classification() == (
            "ORDER Primates SEMIORDER Haplorrhini SUBORDER Simiiformes "
            "INFRAORDER Catarrhini SUPERFAMILY Hominoidea FAMILY Hominidae "
            "GENUS Homo SPECIES Sapiens"
        )
        assert [t.name for t in sapiens.lineage()][-1] == "Primates"

    def test_rank_counts_match_queries(self, primates_tree):
        counts = primates_tree.rank_counts()
        for rank, count in zip(counts["rank"], counts["count"]):
            assert len(primates_tree.get_taxa_of_rank(rank)) == count
            assert count == len(PRIMATES_BY_RANK[rank])

    def test_config_driven_build(self, primates_xml, tmp_path):
        config = tmp_path / "taxonomy.yaml"
        config.write_text("build:\n  child_selection: contiguous\n")
        # a comment before the first semiorder ends branch discovery for Primates
        xml = primates_xml.replace(
            '<order name="Primates">', '<order name="Primates"><!-- apes and kin -->'
        )
        element = DomElement.wrap(minidom.parseString(xml))

        tree = TaxonomyTree.from_element(element, options=BuildOptions.load(config))

        assert len(tree) == 1
        assert str(tree.root) == "ORDER Primates ["
        assert len(TaxonomyTree.from_element(element)) == 24

    def test_inconsistent_markup_fails(self):
        xml = '<order name="Primates"><semiorder name="Haplorrhini"><genus name="Homo"/></semiorder></order>'
        with pytest.raises(UnknownRankError, match="genus"):
            TaxonomyTree.from_element(DomElement.wrap(minidom.parseString(xml)))


class TestLogging:
    """Test logging helpers."""

    def test_get_logger_default_name(self):
        assert get_logger().name == "taxonomy_index"
        assert get_logger("taxonomy_index.custom").name == "taxonomy_index.custom"

    def test_setup_logging_accepts_lowercase(self):
        setup_logging("debug")

    def test_build_logs_summary(self, primates_dom, caplog):
        with caplog.at_level(logging.INFO, logger="taxonomy_index"):
            TaxonomyTree.from_element(primates_dom)
        assert any("Indexed 24 taxa under ORDER Primates" in r.getMessage() for r in caplog.records)
